# counsel_api/core/errors.py
from __future__ import annotations
from typing import Any, Dict, Optional
from fastapi import status


class AppError(Exception):
    """Base dos erros que viram resposta JSON com status fixo."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.message
        self.extra: Dict[str, Any] = extra
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, **self.extra}


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHENTICATED"
    message = "Authentication required"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Not found"


class Conflict(AppError):
    # o front das matrículas trata duplicidade como 400
    status_code = status.HTTP_400_BAD_REQUEST
    code = "ALREADY_ENROLLED"
    message = "You are already enrolled in this program"


class StoreError(AppError):
    code = "STORE_ERROR"
    message = "Server error"
