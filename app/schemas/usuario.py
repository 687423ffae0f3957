"""Esquemas para registro y listado de usuarios."""
import uuid

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.practica import PracticaResumen


class UsuarioCreate(BaseModel):
    """Body para registrar un usuario. La contraseña solo se usa para calcular el hash."""

    username: str = Field(description="Nombre de usuario (único)", min_length=3)
    password: str = Field(description="Contraseña en texto", min_length=3)
    name: str = Field(description="Nombre completo", min_length=1)
    rol: str = Field(description="Rol (texto libre)", min_length=1)


class UsuarioOut(BaseModel):
    """Usuario expuesto por la API. No tiene campo para el hash de la contraseña."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    name: str | None = None
    rol: str | None = None
    practicas: list[PracticaResumen] = Field(default_factory=list)
