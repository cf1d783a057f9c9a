# counsel_api/core/tokens.py
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from counsel_api.core.config import MAX_ID, settings

def _now() -> datetime:
    return datetime.now(timezone.utc)

def _exp(minutes: int = 15) -> datetime:
    return _now() + timedelta(minutes=minutes)

def create_access_token(*, account_id: int, expires_minutes: Optional[int] = None) -> str:
    """Access token com o id da conta em `sub`, assinado com SECRET_KEY."""
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    payload: Dict[str, Any] = {
        "type": "access",
        "sub": str(account_id),
        "jti": uuid.uuid4().hex,
        "iat": int(_now().timestamp()),
        "exp": int(_exp(minutes).timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access(token: str) -> Optional[Dict[str, Any]]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if not isinstance(payload, dict):
        return None
    if payload.get("type") != "access":
        return None
    sub = str(payload.get("sub") or "")
    # sub fora do intervalo de ids da tabela accounts nunca identifica uma conta
    if not (sub.isascii() and sub.isdecimal()) or len(sub) > len(str(MAX_ID)):
        return None
    if not 0 < int(sub) <= MAX_ID:
        return None
    return payload

def account_id_from_token(token: str) -> Optional[int]:
    payload = decode_access(token)
    if payload is None:
        return None
    return int(payload["sub"])
