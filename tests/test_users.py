import asyncio
import uuid

import pytest
from sqlalchemy import func, select

from app.api.endpoints import users as users_endpoints
from app.core.database import AsyncSessionLocal
from app.core.security import hash_password, verify_password
from app.models import Usuario, usuario_practica
from app.services.usuario_service import vincular_practicas


USUARIO = {"username": "mlopez", "password": "secreto", "name": "María López", "rol": "docente"}


def _registrar(client, **cambios):
    r = client.post("/api/users", json={**USUARIO, **cambios})
    assert r.status_code == 201, r.text
    return r.json()


def test_registrar_usuario_devuelve_201_sin_hash(client):
    r = client.post("/api/users", json=USUARIO)
    assert r.status_code == 201
    data = r.json()
    assert uuid.UUID(data["id"])
    assert data["username"] == "mlopez"
    assert data["name"] == "María López"
    assert data["rol"] == "docente"
    assert data["practicas"] == []
    assert "password" not in data
    assert "passwordHash" not in data
    assert "password_hash" not in data
    assert "version" not in data
    assert "secreto" not in r.text


def test_registrar_guarda_hash_bcrypt_costo_10(client, run_db):
    creado = _registrar(client)

    async def _leer(session):
        r = await session.execute(select(Usuario).where(Usuario.id == uuid.UUID(creado["id"])))
        return r.scalar_one()

    usuario = run_db(_leer)
    assert usuario.password_hash != "secreto"
    assert usuario.password_hash.startswith("$2b$10$")
    assert verify_password("secreto", usuario.password_hash)
    assert not verify_password("otra", usuario.password_hash)


@pytest.mark.parametrize("campo", ["username", "password", "name", "rol"])
def test_registrar_sin_campo_devuelve_400(client, campo):
    payload = dict(USUARIO)
    payload.pop(campo)
    r = client.post("/api/users", json=payload)
    assert r.status_code == 400
    assert any(e["campo"] == campo for e in r.json()["errores"])


def test_password_de_2_caracteres_se_rechaza(client):
    r = client.post("/api/users", json={**USUARIO, "password": "ab"})
    assert r.status_code == 400
    assert client.get("/api/users").json() == []


def test_password_de_3_caracteres_se_acepta(client):
    r = client.post("/api/users", json={**USUARIO, "password": "abc"})
    assert r.status_code == 201


def test_username_corto_se_rechaza(client):
    r = client.post("/api/users", json={**USUARIO, "username": "ab"})
    assert r.status_code == 400


def test_username_duplicado_se_rechaza(client):
    _registrar(client)
    r = client.post("/api/users", json={**USUARIO, "name": "Otra persona"})
    assert r.status_code == 400
    assert r.json()["detail"] == "El username ya existe"
    assert len(client.get("/api/users").json()) == 1


def test_username_distingue_mayusculas(client):
    _registrar(client, username="mlopez")
    r = client.post("/api/users", json={**USUARIO, "username": "MLopez"})
    assert r.status_code == 201


def test_listar_usuarios_proyecta_practicas(client, run_db, practica_payload):
    usuario = _registrar(client)
    p1 = client.post("/api/practicas", json=practica_payload).json()
    p2 = client.post("/api/practicas", json={**practica_payload, "nombrePractica": "Péndulo"}).json()

    run_db(lambda s: vincular_practicas(
        s, uuid.UUID(usuario["id"]), [uuid.UUID(p1["id"]), uuid.UUID(p2["id"])]
    ))

    r = client.get("/api/users")
    assert r.status_code == 200
    [data] = r.json()
    assert "passwordHash" not in data
    assert len(data["practicas"]) == 2
    for p in data["practicas"]:
        assert set(p) == {"nombrePractica", "fecha", "estado"}
    assert {p["nombrePractica"] for p in data["practicas"]} == {"Medición", "Péndulo"}


def test_vincular_no_duplica_referencias(client, run_db, practica_payload):
    usuario = _registrar(client)
    p = client.post("/api/practicas", json=practica_payload).json()
    uid, pid = uuid.UUID(usuario["id"]), uuid.UUID(p["id"])

    run_db(lambda s: vincular_practicas(s, uid, [pid]))
    run_db(lambda s: vincular_practicas(s, uid, [pid, pid, uuid.uuid4()]))

    [data] = client.get("/api/users").json()
    assert len(data["practicas"]) == 1


def test_vincular_usuario_inexistente_devuelve_none(client, run_db):
    assert run_db(lambda s: vincular_practicas(s, uuid.uuid4(), [])) is None


def test_eliminar_practica_no_limpia_referencias_de_usuarios(client, run_db, practica_payload):
    usuario = _registrar(client)
    p1 = client.post("/api/practicas", json=practica_payload).json()
    p2 = client.post("/api/practicas", json={**practica_payload, "nombrePractica": "Péndulo"}).json()
    uid = uuid.UUID(usuario["id"])
    run_db(lambda s: vincular_practicas(s, uid, [uuid.UUID(p1["id"]), uuid.UUID(p2["id"])]))

    assert client.delete(f"/api/practicas/{p1['id']}").status_code == 204

    async def _contar(session):
        r = await session.execute(
            select(func.count()).select_from(usuario_practica).where(usuario_practica.c.usuario_id == uid)
        )
        return r.scalar_one()

    # La referencia queda colgando, pero no aparece al resolver el join
    assert run_db(_contar) == 2
    [data] = client.get("/api/users").json()
    assert [p["nombrePractica"] for p in data["practicas"]] == ["Péndulo"]


def test_registro_concurrente_lo_frena_la_restriccion_unique(client, run_db, monkeypatch):
    # Otro registro con el mismo username se confirma después de la consulta previa
    # y antes del INSERT: solo la restricción UNIQUE puede detectarlo.
    async def _registrar_rival():
        async with AsyncSessionLocal() as session:
            session.add(Usuario(username=USUARIO["username"], password_hash=hash_password("rival"), name="Rival", rol="docente"))
            await session.commit()

    def _hash_mientras_otro_registra(password):
        asyncio.run(_registrar_rival())
        return hash_password(password)

    monkeypatch.setattr(users_endpoints, "hash_password", _hash_mientras_otro_registra)

    r = client.post("/api/users", json=USUARIO)
    assert r.status_code == 400
    assert r.json()["detail"] == "El username ya existe"

    async def _contar(session):
        r = await session.execute(
            select(func.count()).select_from(Usuario).where(Usuario.username == USUARIO["username"])
        )
        return r.scalar_one()

    assert run_db(_contar) == 1
    [data] = client.get("/api/users").json()
    assert data["name"] == "Rival"
