"""Manejadores centralizados de errores: validación y base de datos."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)

MENSAJE_VALIDACION = "Faltan campos obligatorios o son inválidos"


def _campo(loc: tuple) -> str:
    # loc llega como ("body", "materiales", 0, "cantidad")
    partes = [str(p) for p in loc if p != "body"]
    return ".".join(partes) or "body"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convierte los errores de pydantic en 400 con el detalle por campo."""
    errores = [
        {"campo": _campo(tuple(err.get("loc", ()))), "mensaje": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": MENSAJE_VALIDACION, "errores": errores},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Violación de restricción (ej. username único ganado por otra petición concurrente)."""
    logger.warning("Violación de integridad en %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "El registro viola una restricción de unicidad o integridad"},
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    """Cualquier otro fallo del almacenamiento: 500 sin reintentos."""
    logger.exception("Error de base de datos en %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error interno de base de datos"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los manejadores en la aplicación."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
