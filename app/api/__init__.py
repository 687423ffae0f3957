"""Routers de la API."""
from fastapi import APIRouter

from app.api.endpoints import practicas, users

router = APIRouter()
router.include_router(practicas.router)
router.include_router(users.router)


@router.get(
    "/",
    tags=["api"],
    summary="Raíz de la API",
    response_description="Mensaje de bienvenida y enlace a la documentación",
)
async def api_root():
    """Información básica de la API y enlace a la documentación Swagger."""
    return {"message": "LABFI Prácticas API", "docs": "/docs", "redoc": "/redoc"}
