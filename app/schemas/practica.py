"""Esquemas para creación y respuesta de prácticas.

Los campos viajan en camelCase (nombrePractica, horaInicio, ...) mediante
alias; internamente se usan los nombres de columna en snake_case.
"""
import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

_DATETIME = TypeAdapter(datetime)


class CamelModel(BaseModel):
    """Base con alias camelCase; acepta también el nombre interno y objetos ORM."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MaterialItem(CamelModel):
    """Línea de material: descripción y cantidad."""

    descripcion: str = Field(description="Descripción del material (ej. Micrómetro)", min_length=1)
    cantidad: int | float = Field(description="Cantidad solicitada")

    @field_validator("cantidad")
    @classmethod
    def cantidad_entera(cls, v: int | float) -> int | float:
        # La columna es Float: 2.0 leído de la base vuelve a salir como 2
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


class PracticaCreate(CamelModel):
    """Body para registrar una práctica. materiales y observaciones son opcionales."""

    nombre_practica: str = Field(description="Nombre de la práctica", min_length=1)
    asignatura: str = Field(description="Asignatura (ej. Física I)", min_length=1)
    grupo: str = Field(description="Grupo (ej. B1)", min_length=1)
    escuela: str = Field(description="Escuela profesional", min_length=1)
    fecha: date = Field(description="Fecha programada (YYYY-MM-DD)")
    hora_inicio: str = Field(description="Hora de inicio (texto libre, ej. 7am)", min_length=1)
    hora_fin: str = Field(description="Hora de fin (texto libre, ej. 9am)", min_length=1)
    ambiente: str = Field(description="Ambiente o aula (ej. 1E-103)", min_length=1)
    docente: str = Field(description="Docente a cargo", min_length=1)
    materiales: list[MaterialItem] | None = Field(
        default=None, description="Materiales solicitados, en orden"
    )
    observaciones: str | None = Field(default=None, description="Observaciones libres")

    @field_validator("fecha", mode="before")
    @classmethod
    def fecha_desde_datetime(cls, v):
        """Acepta también fecha-hora ISO (ej. 2024-05-10T14:30:00.000Z) y conserva solo la fecha."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            try:
                return _DATETIME.validate_python(v).date()
            except ValidationError:
                raise ValueError("fecha-hora ISO inválida") from None
        return v


class PracticaOut(CamelModel):
    """Práctica tal como se expone por la API: id en texto, sin metadatos de versión."""

    id: uuid.UUID
    nombre_practica: str
    asignatura: str
    grupo: str
    escuela: str
    fecha: date
    fecha_formateada: str = Field(description="Fecha en formato DD/MM/YY")
    hora_inicio: str
    hora_fin: str
    ambiente: str
    docente: str
    materiales: list[MaterialItem]
    observaciones: str
    estado: bool = Field(description="false = pendiente, true = completada")


class PracticaResumen(CamelModel):
    """Proyección de una práctica dentro del listado de usuarios."""

    nombre_practica: str
    fecha: date
    estado: bool
