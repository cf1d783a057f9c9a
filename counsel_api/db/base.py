# counsel_api/db/base.py
from counsel_api.db.base_class import Base

# Carrega os models para registrar as tabelas no metadata (Alembic / create_all)
from counsel_api.models.account import Account  # noqa: F401
from counsel_api.models.program import Program  # noqa: F401
from counsel_api.models.attendee import ProgramAttendee  # noqa: F401

__all__ = ["Base"]
