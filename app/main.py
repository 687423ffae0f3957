"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.core.config import settings
from app.core.database import engine, init_db
from app.core.errors import register_exception_handlers
from app.models import *  # noqa: F401, F403 - Registra modelos en Base.metadata antes de init_db

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Documentación Swagger: disponible en /docs (OpenAPI 3.0)
OPENAPI_TAGS = [
    {
        "name": "practicas",
        "description": "Solicitudes de materiales para prácticas de laboratorio: registrar, listar, eliminar y cambiar estado.",
    },
    {
        "name": "users",
        "description": "Registro de usuarios y listado con sus prácticas asociadas.",
    },
    {
        "name": "api",
        "description": "Información general de la API.",
    },
    {
        "name": "salud",
        "description": "Comprobación del estado del servicio.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestiona el ciclo de vida: crea las tablas al iniciar y libera el pool al cerrar."""
    await init_db()
    logger.info("Base de datos lista (%s)", engine.url.get_backend_name())
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="""
API REST del backend de **LABFI**: solicitudes de materiales para prácticas de laboratorio y usuarios.

- **Swagger UI:** [GET /docs](/docs)
- **ReDoc:** [GET /redoc](/redoc)
""",
    version="0.1.0",
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

register_exception_handlers(app)

# CORS: el frontend se sirve desde otro puerto/dominio
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get(
    "/health",
    tags=["salud"],
    summary="Estado del servicio",
    response_description="Indica que la API está en ejecución",
)
async def health_check():
    """Comprueba que el servicio está activo."""
    return {"status": "ok", "message": "Servicio en ejecución"}
