import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# La app lee DATABASE_URL al importarse: debe fijarse antes de importar app.*
_DB_DIR = Path(tempfile.mkdtemp(prefix="labfi-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"

from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import AsyncSessionLocal, drop_db, init_db  # noqa: E402
from app.main import app  # noqa: E402


async def _reset_db():
    await drop_db()
    await init_db()


@pytest.fixture
def client():
    """Cliente HTTP sobre una base de datos vacía."""
    asyncio.run(_reset_db())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def run_db():
    """Ejecuta `fn(session)` en una sesión propia, con commit al final."""

    def _run(fn):
        async def _wrap():
            async with AsyncSessionLocal() as session:
                result = await fn(session)
                await session.commit()
                return result

        return asyncio.run(_wrap())

    return _run


@pytest.fixture
def practica_payload():
    return {
        "nombrePractica": "Medición",
        "asignatura": "Física I",
        "grupo": "B1",
        "escuela": "Ing. Sistemas",
        "fecha": "2024-05-10",
        "horaInicio": "7am",
        "horaFin": "9am",
        "ambiente": "1E-103",
        "docente": "E. Ccahua",
        "materiales": [{"descripcion": "Micrómetro", "cantidad": 2}],
    }
