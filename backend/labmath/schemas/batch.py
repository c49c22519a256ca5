from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class BatchSummary(BaseModel):
    total_rows: int
    success_rows: int
    failed_rows: int


class BatchResponse(BaseModel):
    kind: str
    filename: str | None = None
    summary: BatchSummary
    preview: list[dict[str, Any]]
    result_csv: str
