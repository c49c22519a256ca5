from __future__ import annotations

from pydantic import BaseModel, Field

from labmath.services.stats import MAX_PARTITIONS


class PdfResponse(BaseModel):
    z: float
    pdf: float


class CdfResponse(BaseModel):
    z: float
    cdf: float


class InvCdfResponse(BaseModel):
    p: float
    z: float


# ----------------
# Area under curve
# ----------------


class AreaRequest(BaseModel):
    a: float = Field(description="First bound (order does not matter)")
    b: float = Field(description="Second bound (order does not matter)")
    n: float = Field(
        default=10,
        le=MAX_PARTITIONS,
        description="Number of midpoint rectangles (floored, at least 1)",
    )
    include_rectangles: bool = Field(default=False, description="Also return the rectangles for drawing")


class RectangleOut(BaseModel):
    x0: float
    x1: float
    height: float


class AreaResponse(BaseModel):
    lo: float
    hi: float
    n: int
    exact: float
    approx: float
    error: float
    rectangles: list[RectangleOut] | None = None


# -------------------
# Confidence interval
# -------------------


class ConfidenceIntervalRequest(BaseModel):
    confidence: float = Field(default=0.95, description="Central mass, e.g. 0.95")


class ConfidenceIntervalResponse(BaseModel):
    confidence: float
    alpha: float
    half_alpha: float
    p: float
    z: float
    lower: float
    upper: float


# --------
# Quantile
# --------


class QuantileRequest(BaseModel):
    p: float = Field(default=0.975, description="Target probability p = Phi(z)")


class QuantileResponse(BaseModel):
    p: float
    z: float
    tail: float


class CurvePoint(BaseModel):
    x: float
    y: float


class CurveResponse(BaseModel):
    x_min: float
    x_max: float
    samples: int
    points: list[CurvePoint]
