"""Endpoints de usuarios: listado con prácticas asociadas y registro."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.database import get_db
from app.core.security import hash_password
from app.models import Usuario
from app.schemas.usuario import UsuarioCreate, UsuarioOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

USERNAME_DUPLICADO = "El username ya existe"


@router.get(
    "",
    response_model=list[UsuarioOut],
    summary="Listar usuarios",
    description="Lista los usuarios; cada práctica asociada se resume en nombrePractica, fecha y estado.",
)
async def listar_usuarios(db: AsyncSession = Depends(get_db)):
    q = select(Usuario).options(selectinload(Usuario.practicas))
    result = await db.execute(q)
    usuarios = result.scalars().all()
    return [UsuarioOut.model_validate(u) for u in usuarios]


@router.post(
    "",
    response_model=UsuarioOut,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar usuario",
    description="Registra un usuario. La contraseña (mínimo 3 caracteres) se guarda solo como hash bcrypt.",
    responses={400: {"description": "Campos faltantes, contraseña corta o username existente"}},
)
async def registrar_usuario(body: UsuarioCreate, db: AsyncSession = Depends(get_db)):
    # La restricción UNIQUE de la tabla cubre la carrera entre esta consulta y el insert
    r = await db.execute(select(Usuario).where(Usuario.username == body.username))
    if r.scalar_one_or_none():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USERNAME_DUPLICADO)

    # bcrypt es intensivo en CPU: se calcula fuera del event loop
    password_hash = await run_in_threadpool(hash_password, body.password)
    usuario = Usuario(
        username=body.username,
        password_hash=password_hash,
        name=body.name,
        rol=body.rol,
        practicas=[],
    )
    db.add(usuario)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USERNAME_DUPLICADO)
    logger.info("Usuario registrado id=%s username=%s", usuario.id, usuario.username)
    return UsuarioOut.model_validate(usuario)
