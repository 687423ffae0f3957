"""Servicio de asociación entre usuarios y prácticas."""
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Practica, Usuario


async def vincular_practicas(
    db: AsyncSession,
    usuario_id: uuid.UUID,
    practica_ids: list[uuid.UUID],
) -> Usuario | None:
    """Agrega las prácticas indicadas al usuario sin duplicar referencias.

    Devuelve el usuario con sus prácticas cargadas, o None si el usuario no
    existe. Los ids que no corresponden a ninguna práctica se ignoran.
    No hace commit: el llamador decide cuándo confirmar.
    """
    r = await db.execute(
        select(Usuario)
        .options(selectinload(Usuario.practicas))
        .where(Usuario.id == usuario_id)
    )
    usuario = r.scalar_one_or_none()
    if not usuario:
        return None

    if practica_ids:
        r_pr = await db.execute(select(Practica).where(Practica.id.in_(practica_ids)))
        ya_vinculadas = {p.id for p in usuario.practicas}
        for practica in r_pr.scalars().all():
            if practica.id not in ya_vinculadas:
                usuario.practicas.append(practica)
                ya_vinculadas.add(practica.id)
    await db.flush()
    return usuario
