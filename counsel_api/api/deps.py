from typing import Optional
from fastapi import Depends, Header

from counsel_api.core.errors import Unauthenticated
from counsel_api.core.tokens import account_id_from_token
from counsel_api.db.session import get_db  # noqa: F401  (reexport para os routers)

# ----------------------------------------------------------------------
# Lê o Bearer do header Authorization; ausência vira None, nunca erro
# ----------------------------------------------------------------------
def get_bearer_token(authorization: Optional[str] = Header(None, alias="Authorization")) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]

# ----------------------------------------------------------------------
# Identidade da requisição: id numérico da conta ou None
# ----------------------------------------------------------------------
def get_current_account_id(token: Optional[str] = Depends(get_bearer_token)) -> Optional[int]:
    if not token:
        return None
    return account_id_from_token(token)

def require_account_id(account_id: Optional[int] = Depends(get_current_account_id)) -> int:
    if account_id is None:
        raise Unauthenticated()
    return account_id
