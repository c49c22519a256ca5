from __future__ import annotations

from fastapi import APIRouter

from labmath.meta.widget_catalog import CATALOG


router = APIRouter()


@router.get("/widgets")
def get_widget_catalog() -> dict[str, object]:
    """Return widget control metadata used by the frontend."""
    return CATALOG
