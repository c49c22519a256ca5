from fastapi import APIRouter

from labmath.api.endpoints import batch, meta, moments, normal

api_router = APIRouter()

api_router.include_router(normal.router, prefix="/v1/normal", tags=["normal"])
api_router.include_router(moments.router, prefix="/v1/moments", tags=["moments"])
api_router.include_router(batch.router, prefix="/v1/batch", tags=["batch"])
api_router.include_router(meta.router, prefix="/v1/meta", tags=["meta"])
