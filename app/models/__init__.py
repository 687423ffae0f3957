"""Modelos SQLAlchemy (tablas de la base de datos)."""
from app.models.practica import MaterialPractica, Practica
from app.models.user import Usuario, usuario_practica

__all__ = [
    "Practica",
    "MaterialPractica",
    "Usuario",
    "usuario_practica",
]
