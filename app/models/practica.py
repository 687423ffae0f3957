"""Modelo Practica (solicitud de materiales para una sesión de laboratorio)."""
import uuid
from datetime import date

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class Practica(Base):
    """Práctica de laboratorio: datos de la sesión, materiales solicitados y estado.

    estado=False significa pendiente, True completada. Solo cambia mediante
    el endpoint de alternar estado.
    """

    __tablename__ = "practicas"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    nombre_practica: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "Medición y Cálculo de Errores"
    asignatura: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "Física I"
    grupo: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "B1"
    escuela: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "Ingeniería de Sistemas"
    fecha: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    hora_inicio: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "7am"
    hora_fin: Mapped[str] = mapped_column(Text, nullable=False)
    ambiente: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "1E-103"
    docente: Mapped[str] = mapped_column(Text, nullable=False)
    observaciones: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=text("''")
    )
    estado: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    # Contador de modificaciones; no se serializa
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default=text("1"))

    materiales: Mapped[list["MaterialPractica"]] = relationship(
        "MaterialPractica",
        back_populates="practica",
        order_by="MaterialPractica.posicion",
        cascade="all, delete-orphan",
    )

    @property
    def fecha_formateada(self) -> str:
        """Fecha en formato DD/MM/YY; vacío si no hay fecha."""
        if not self.fecha:
            return ""
        return f"{self.fecha.day:02d}/{self.fecha.month:02d}/{self.fecha.year % 100:02d}"


class MaterialPractica(Base):
    """Línea de material solicitado (descripción y cantidad) en el orden en que se registró."""

    __tablename__ = "materiales_practica"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    practica_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("practicas.id", ondelete="CASCADE"), nullable=False
    )
    posicion: Mapped[int] = mapped_column(Integer, nullable=False)
    descripcion: Mapped[str] = mapped_column(Text, nullable=False)  # Ej: "Micrómetro"
    cantidad: Mapped[float] = mapped_column(Float, nullable=False)

    practica: Mapped["Practica"] = relationship("Practica", back_populates="materiales")
