"""Modelo Usuario y asociación usuario-práctica."""
import uuid

from sqlalchemy import Column, ForeignKey, Integer, Table, Text, Uuid, text
from sqlalchemy.orm import Mapped, foreign, mapped_column, relationship

from app.core.database import Base
from app.models.practica import Practica

# practica_id sin ForeignKey: borrar una práctica no toca las referencias de los usuarios;
# las referencias colgantes simplemente no aparecen al resolver el join.
usuario_practica = Table(
    "usuario_practica",
    Base.metadata,
    Column("usuario_id", Uuid, ForeignKey("usuarios.id", ondelete="CASCADE"), primary_key=True),
    Column("practica_id", Uuid, primary_key=True),
)


class Usuario(Base):
    """Usuario que registra prácticas. El hash de la contraseña nunca se expone."""

    __tablename__ = "usuarios"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    rol: Mapped[str | None] = mapped_column(Text, nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default=text("1"))

    practicas: Mapped[list["Practica"]] = relationship(
        "Practica",
        secondary=usuario_practica,
        primaryjoin=lambda: Usuario.id == usuario_practica.c.usuario_id,
        secondaryjoin=lambda: foreign(usuario_practica.c.practica_id) == Practica.id,
    )
