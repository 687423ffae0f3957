"""Endpoints de prácticas: listar, obtener, registrar, eliminar y alternar estado."""
import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.database import get_db
from app.models import MaterialPractica, Practica
from app.schemas.practica import PracticaCreate, PracticaOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/practicas", tags=["practicas"])

NO_ENCONTRADA = "Práctica no encontrada"


def _parse_id(practica_id: str) -> uuid.UUID:
    """Un id que no es UUID se trata igual que uno inexistente."""
    try:
        return uuid.UUID(practica_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)


async def obtener_practica(db: AsyncSession, practica_id: str) -> Practica:
    """Busca la práctica con sus materiales; 404 si no existe o el id no es un UUID válido."""
    pid = _parse_id(practica_id)
    result = await db.execute(
        select(Practica)
        .options(selectinload(Practica.materiales))
        .where(Practica.id == pid)
    )
    practica = result.scalar_one_or_none()
    if not practica:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)
    return practica


@router.get(
    "",
    response_model=list[PracticaOut],
    summary="Listar prácticas",
    description="Devuelve todas las prácticas ordenadas por fecha, de la más reciente a la más antigua.",
)
async def listar_practicas(db: AsyncSession = Depends(get_db)):
    q = (
        select(Practica)
        .options(selectinload(Practica.materiales))
        .order_by(Practica.fecha.desc())
    )
    result = await db.execute(q)
    practicas = result.scalars().all()
    return [PracticaOut.model_validate(p) for p in practicas]


@router.get(
    "/{practica_id}",
    response_model=PracticaOut,
    summary="Obtener práctica",
    responses={404: {"description": NO_ENCONTRADA}},
)
async def obtener(practica_id: str, db: AsyncSession = Depends(get_db)):
    practica = await obtener_practica(db, practica_id)
    return PracticaOut.model_validate(practica)


@router.post(
    "",
    response_model=PracticaOut,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar práctica",
    description="Registra una práctica con estado pendiente. materiales y observaciones son opcionales.",
    responses={400: {"description": "Faltan campos obligatorios"}},
)
async def crear_practica(body: PracticaCreate, db: AsyncSession = Depends(get_db)):
    practica = Practica(
        nombre_practica=body.nombre_practica,
        asignatura=body.asignatura,
        grupo=body.grupo,
        escuela=body.escuela,
        fecha=body.fecha,
        hora_inicio=body.hora_inicio,
        hora_fin=body.hora_fin,
        ambiente=body.ambiente,
        docente=body.docente,
        observaciones=body.observaciones or "",
        estado=False,
        materiales=[
            MaterialPractica(posicion=i, descripcion=m.descripcion, cantidad=m.cantidad)
            for i, m in enumerate(body.materiales or [])
        ],
    )
    db.add(practica)
    await db.commit()
    logger.info("Práctica registrada id=%s (%d materiales)", practica.id, len(practica.materiales))
    return PracticaOut.model_validate(practica)


@router.delete(
    "/{practica_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar práctica",
    description="Elimina la práctica y sus materiales. Las referencias desde usuarios no se modifican.",
    responses={404: {"description": NO_ENCONTRADA}},
)
async def eliminar_practica(practica_id: str, db: AsyncSession = Depends(get_db)):
    practica = await obtener_practica(db, practica_id)
    pid = practica.id
    await db.delete(practica)
    await db.commit()
    logger.info("Práctica eliminada id=%s", pid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{practica_id}",
    response_model=PracticaOut,
    summary="Alternar estado",
    description="Cambia el estado de la práctica: pendiente ↔ completada.",
    responses={404: {"description": NO_ENCONTRADA}},
)
async def alternar_estado(practica_id: str, db: AsyncSession = Depends(get_db)):
    # UPDATE atómico: peticiones concurrentes se aplican una tras otra sin conflicto
    pid = _parse_id(practica_id)
    result = await db.execute(
        update(Practica)
        .where(Practica.id == pid)
        .values(estado=~Practica.estado, version=Practica.version + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)
    await db.commit()
    practica = await obtener_practica(db, practica_id)
    logger.info("Práctica id=%s estado=%s", practica.id, practica.estado)
    return PracticaOut.model_validate(practica)
