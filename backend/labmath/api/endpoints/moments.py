from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException

from labmath.api.deps import get_app_settings
from labmath.config.settings import Settings
from labmath.schemas.moments import MomentRowOut, MomentsRequest, MomentsResponse
from labmath.services.moments import bar_magnitude, estimate_moments, max_magnitude

log = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=MomentsResponse)
def post_moments(req: MomentsRequest, settings: Settings = Depends(get_app_settings)) -> MomentsResponse:
    """Exact vs. Monte Carlo raw moments E[X^k], plus bar magnitudes for the chart."""
    seed = req.seed if req.seed is not None else settings.moments_seed
    try:
        res = estimate_moments(req.distribution, k_max=req.k_max, samples=req.samples, seed=seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    log.debug("moments_estimated", distribution=res.distribution, k_max=res.k_max, samples=res.samples)

    rows = [
        MomentRowOut(
            k=r.k,
            exact=r.exact,
            estimate=r.estimate,
            exact_magnitude=bar_magnitude(r.exact, req.scale),
            estimate_magnitude=bar_magnitude(r.estimate, req.scale),
        )
        for r in res.rows
    ]

    return MomentsResponse(
        distribution=res.distribution,
        k_max=res.k_max,
        samples=res.samples,
        seed=res.seed,
        scale=req.scale,
        max_magnitude=max_magnitude(res.rows, req.scale),
        rows=rows,
    )
