"""Utilidades de seguridad: hash y verificación de contraseñas con bcrypt."""
import bcrypt

from app.core.config import settings


def hash_password(plain_password: str) -> str:
    """Genera el hash bcrypt de la contraseña en texto (costo settings.bcrypt_rounds)."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Comprueba si la contraseña en texto coincide con el hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        return False
