from __future__ import annotations

import math

import structlog
from fastapi import APIRouter, HTTPException, Query

from labmath.schemas.normal import (
    AreaRequest,
    AreaResponse,
    CdfResponse,
    ConfidenceIntervalRequest,
    ConfidenceIntervalResponse,
    CurvePoint,
    CurveResponse,
    InvCdfResponse,
    PdfResponse,
    QuantileRequest,
    QuantileResponse,
    RectangleOut,
)
from labmath.services.stats import (
    area_summary,
    cdf,
    confidence_interval,
    curve,
    inv_cdf,
    pdf,
    quantile,
    riemann_rectangles,
)

log = structlog.get_logger(__name__)

router = APIRouter()


def _require_number(name: str, value: float) -> float:
    # +/-inf is allowed through and saturates; only NaN is meaningless here
    if math.isnan(value):
        raise HTTPException(status_code=400, detail=f"{name} must be a number")
    return value


@router.get("/pdf", response_model=PdfResponse)
def get_pdf(z: float = Query(description="Standardized coordinate")) -> PdfResponse:
    z = _require_number("z", z)
    return PdfResponse(z=z, pdf=pdf(z))


@router.get("/cdf", response_model=CdfResponse)
def get_cdf(z: float = Query(description="Standardized coordinate")) -> CdfResponse:
    z = _require_number("z", z)
    return CdfResponse(z=z, cdf=cdf(z))


@router.get("/inv-cdf", response_model=InvCdfResponse)
def get_inv_cdf(p: float = Query(description="Probability; clamped to [1e-12, 1 - 1e-12]")) -> InvCdfResponse:
    try:
        z = inv_cdf(p)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return InvCdfResponse(p=p, z=z)


@router.post("/area", response_model=AreaResponse)
def post_area(req: AreaRequest) -> AreaResponse:
    """Exact area vs. midpoint Riemann sum over [min(a,b), max(a,b)]."""
    try:
        res = area_summary(req.a, req.b, req.n)
        rects = riemann_rectangles(req.a, req.b, req.n) if req.include_rectangles else None
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    log.debug("area_computed", lo=res.lo, hi=res.hi, n=res.n, error=res.error)

    return AreaResponse(
        lo=res.lo,
        hi=res.hi,
        n=res.n,
        exact=res.exact,
        approx=res.approx,
        error=res.error,
        rectangles=[RectangleOut(x0=r.x0, x1=r.x1, height=r.height) for r in rects] if rects is not None else None,
    )


@router.post("/confidence-interval", response_model=ConfidenceIntervalResponse)
def post_confidence_interval(req: ConfidenceIntervalRequest) -> ConfidenceIntervalResponse:
    try:
        res = confidence_interval(req.confidence)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    log.debug("confidence_interval_computed", confidence=res.confidence, z=res.z)

    return ConfidenceIntervalResponse(
        confidence=res.confidence,
        alpha=res.alpha,
        half_alpha=res.half_alpha,
        p=res.p,
        z=res.z,
        lower=-res.z,
        upper=res.z,
    )


@router.post("/quantile", response_model=QuantileResponse)
def post_quantile(req: QuantileRequest) -> QuantileResponse:
    try:
        res = quantile(req.p)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return QuantileResponse(p=res.p, z=res.z, tail=res.tail)


@router.get("/curve", response_model=CurveResponse)
def get_curve(
    x_min: float = -4.0,
    x_max: float = 4.0,
    samples: int = Query(default=480, ge=1, le=5000),
) -> CurveResponse:
    """Sampled PDF for the chart renderer."""
    try:
        points = curve(x_min, x_max, samples)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return CurveResponse(
        x_min=x_min,
        x_max=x_max,
        samples=samples,
        points=[CurvePoint(x=x, y=y) for x, y in points],
    )
