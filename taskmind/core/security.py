from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from taskmind.core.config import settings

ALGORITHM = "HS256"


def _create_token(user_id: int, email: str, token_type: str, expire_min: int) -> str:
    payload = {
        "user_id": user_id,
        "email": email,
        "exp": datetime.utcnow() + timedelta(minutes=expire_min),
        "type": token_type
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def create_access_token(user_id: int, email: str) -> str:
    #crée un token d'accès JWT de 15 minutes
    return _create_token(user_id, email, "access", settings.JWT_EXPIRE_MIN)


def create_refresh_token(user_id: int, email: str) -> str:
    #crée un token de rafraîchissement JWT au bout de 30 jours
    return _create_token(user_id, email, "refresh", settings.JWT_REFRESH_EXPIRE_MIN)


def verify_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None


def decode_token(token: str, expected_type: str = "access") -> Optional[int]:
    """Retourne le user_id si le token est valide et du bon type"""
    payload = verify_token(token)
    if payload is None or payload.get("type") != expected_type:
        return None
    return payload.get("user_id")
