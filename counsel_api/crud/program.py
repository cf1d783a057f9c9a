from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from counsel_api.crud.base import CRUDBase
from counsel_api.models.program import Program

class CRUDProgram(CRUDBase[Program]):
    def find_active_by_id(self, db: Session, program_id: int) -> Optional[Program]:
        return db.execute(
            select(Program).where(Program.id == program_id, Program.is_disabled.is_(False))
        ).scalar_one_or_none()

    def list_active(self, db: Session) -> List[Program]:
        stmt = select(Program).where(Program.is_disabled.is_(False)).order_by(Program.date.desc())
        return list(db.execute(stmt).scalars().all())

program_crud = CRUDProgram(Program)
