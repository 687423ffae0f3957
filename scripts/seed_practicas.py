"""Script para crear un usuario de prueba con prácticas de ejemplo asociadas."""
import asyncio
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select
from app.core.database import AsyncSessionLocal, init_db
from app.core.security import hash_password
from app.models import MaterialPractica, Practica, Usuario
from app.services.usuario_service import vincular_practicas

USUARIO_USERNAME = "laboratorista"
USUARIO_NOMBRE = "Usuario Prueba"
USUARIO_ROL = "laboratorista"
# Contraseña de prueba (se guarda hasheada con bcrypt)
USUARIO_PASSWORD_PLAIN = "1234"

PRACTICAS = [
    {
        "nombre_practica": "Medición y Cálculo de Errores",
        "asignatura": "Física I",
        "grupo": "B1",
        "escuela": "Ingeniería de Sistemas",
        "fecha": date(2024, 5, 10),
        "hora_inicio": "7am",
        "hora_fin": "9am",
        "ambiente": "1E-103",
        "docente": "Eduardo Ccahua Benites",
        "materiales": [("Micrómetro", 2), ("Vernier", 4)],
    },
    {
        "nombre_practica": "Movimiento Rectilíneo Uniforme",
        "asignatura": "Física I",
        "grupo": "B2",
        "escuela": "Ingeniería Civil",
        "fecha": date(2024, 5, 17),
        "hora_inicio": "9am",
        "hora_fin": "11am",
        "ambiente": "1E-104",
        "docente": "Eduardo Ccahua Benites",
        "materiales": [("Carril de aire", 1), ("Cronómetro", 3)],
    },
]


async def seed_practicas():
    await init_db()
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Usuario).where(Usuario.username == USUARIO_USERNAME))
        usuario = result.scalar_one_or_none()
        if not usuario:
            usuario = Usuario(
                username=USUARIO_USERNAME,
                password_hash=hash_password(USUARIO_PASSWORD_PLAIN),
                name=USUARIO_NOMBRE,
                rol=USUARIO_ROL,
                practicas=[],
            )
            session.add(usuario)
            await session.flush()
            print(f"  + Usuario creado: {usuario.username} (id={usuario.id})")
        else:
            print(f"  = Usuario existente: {usuario.username} (id={usuario.id})")

        ids = []
        for datos in PRACTICAS:
            result = await session.execute(
                select(Practica).where(
                    Practica.nombre_practica == datos["nombre_practica"],
                    Practica.fecha == datos["fecha"],
                )
            )
            practica = result.scalar_one_or_none()
            if not practica:
                campos = {k: v for k, v in datos.items() if k != "materiales"}
                practica = Practica(
                    **campos,
                    materiales=[
                        MaterialPractica(posicion=i, descripcion=desc, cantidad=cant)
                        for i, (desc, cant) in enumerate(datos["materiales"])
                    ],
                )
                session.add(practica)
                await session.flush()
                print(f"  + Práctica creada: {practica.nombre_practica} ({practica.fecha_formateada})")
            ids.append(practica.id)

        await vincular_practicas(session, usuario.id, ids)
        await session.commit()
    print("Listo.")
    print(f"  Usuario: {USUARIO_USERNAME} / {USUARIO_PASSWORD_PLAIN}")


if __name__ == "__main__":
    asyncio.run(seed_practicas())
