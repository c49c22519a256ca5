from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class MomentsRequest(BaseModel):
    distribution: Literal["normal", "uniform", "exponential"] = Field(default="normal")
    k_max: float = Field(default=8, description="Highest moment order (rounded, clamped to [1, 10])")
    samples: float = Field(default=2500, description="Monte Carlo draws (rounded, clamped to [200, 20000])")
    seed: int | None = Field(default=None, description="xorshift32 seed; server default when omitted")
    scale: Literal["linear", "log"] = Field(default="log", description="Bar magnitude scale for the chart")


class MomentRowOut(BaseModel):
    k: int
    exact: float
    estimate: float
    exact_magnitude: float
    estimate_magnitude: float


class MomentsResponse(BaseModel):
    distribution: str
    k_max: int
    samples: int
    seed: int
    scale: str
    max_magnitude: float
    rows: list[MomentRowOut]
