from __future__ import annotations

import csv
import io
from collections.abc import Callable
from typing import Any

import structlog
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from labmath.api.deps import get_app_settings
from labmath.config.settings import Settings
from labmath.schemas.batch import BatchResponse, BatchSummary
from labmath.services.stats import MAX_PARTITIONS, area_summary, quantile

log = structlog.get_logger(__name__)

router = APIRouter()


def _read_upload_as_text(file: UploadFile) -> str:
    raw = file.file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file")
    # Handle BOM if present
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 encoded") from None


def _as_float(row: dict[str, str], key: str, default: float | None = None) -> float:
    v = (row.get(key) or "").strip()
    if v == "":
        if default is not None:
            return default
        raise ValueError(f"Missing value for {key}")
    return float(v)


def _make_result_csv(headers: list[str], rows: list[list[Any]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buf.getvalue()


def _run_batch(
    file: UploadFile,
    *,
    kind: str,
    required: list[str],
    output_columns: list[str],
    compute: Callable[[dict[str, str]], dict[str, float | int]],
    settings: Settings,
) -> BatchResponse:
    """Evaluate every CSV row independently; a bad row is reported, not fatal."""
    text = _read_upload_as_text(file)
    reader = csv.DictReader(io.StringIO(text))

    if not reader.fieldnames:
        raise HTTPException(status_code=400, detail="CSV must include a header row")
    missing = [c for c in required if c not in reader.fieldnames]
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing columns: {', '.join(missing)}")

    results: list[dict[str, Any]] = []
    csv_rows: list[list[Any]] = []

    total = 0
    ok = 0
    failed = 0

    for idx, row in enumerate(reader, start=1):
        if idx > settings.batch_max_rows:
            raise HTTPException(status_code=400, detail=f"CSV exceeds {settings.batch_max_rows} rows")
        total += 1
        status = "ok"
        err = ""

        try:
            out: dict[str, Any] = dict(compute(row))
            ok += 1
        except ValueError as e:
            status = "error"
            err = str(e)
            out = {c: None for c in output_columns}
            failed += 1

        results.append(
            {
                "row_index": idx,
                "status": status,
                "error": err,
                "input": {k: row.get(k) for k in required},
                "output": out,
            }
        )
        csv_rows.append([idx, status, err, *(out[c] for c in output_columns)])

    result_csv = _make_result_csv(["row_index", "status", "error", *output_columns], csv_rows)
    summary = BatchSummary(total_rows=total, success_rows=ok, failed_rows=failed)

    log.info(
        "batch_completed",
        kind=kind,
        filename=file.filename,
        total_rows=total,
        success_rows=ok,
        failed_rows=failed,
    )

    return BatchResponse(
        kind=kind,
        filename=file.filename,
        summary=summary,
        preview=results[: settings.batch_preview_rows],
        result_csv=result_csv,
    )


def _area_row(row: dict[str, str]) -> dict[str, float | int]:
    n = _as_float(row, "n", default=10.0)
    if n > MAX_PARTITIONS:
        raise ValueError(f"n must be <= {MAX_PARTITIONS}")
    res = area_summary(_as_float(row, "a"), _as_float(row, "b"), n)
    return {"lo": res.lo, "hi": res.hi, "n": res.n, "exact": res.exact, "approx": res.approx, "approx_error": res.error}


def _quantile_row(row: dict[str, str]) -> dict[str, float | int]:
    res = quantile(_as_float(row, "p"))
    return {"z": res.z, "tail": res.tail}


@router.post("/area/csv", response_model=BatchResponse)
def batch_area_csv(file: UploadFile = File(...), settings: Settings = Depends(get_app_settings)) -> BatchResponse:
    """Columns: a, b and optionally n (defaults to 10 when blank or absent)."""
    return _run_batch(
        file,
        kind="area",
        required=["a", "b"],
        output_columns=["lo", "hi", "n", "exact", "approx", "approx_error"],
        compute=_area_row,
        settings=settings,
    )


@router.post("/quantile/csv", response_model=BatchResponse)
def batch_quantile_csv(file: UploadFile = File(...), settings: Settings = Depends(get_app_settings)) -> BatchResponse:
    return _run_batch(
        file,
        kind="quantile",
        required=["p"],
        output_columns=["z", "tail"],
        compute=_quantile_row,
        settings=settings,
    )
