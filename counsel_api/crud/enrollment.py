# counsel_api/crud/enrollment.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError

from counsel_api.core.errors import Conflict, NotFound, Unauthenticated
from counsel_api.crud.base import CRUDBase
from counsel_api.crud.program import program_crud
from counsel_api.models.account import Account
from counsel_api.models.attendee import ProgramAttendee, AttendeeStatus
from counsel_api.models.program import Program
from counsel_api.schemas.enrollment import (
    AttendeeView,
    EnrolledProgram,
    EnrolledProgramList,
    EnrollmentCreated,
    EnrollmentStatusOut,
    UnenrollOut,
)

logger = logging.getLogger(__name__)

def _now() -> datetime:
    return datetime.now(timezone.utc)

def _require_account(account_id: Optional[int]) -> int:
    if not account_id:
        raise Unauthenticated()
    return account_id


class CRUDAttendee(CRUDBase[ProgramAttendee]):
    """Ciclo de vida da matrícula (programa, conta).

    Toda operação do próprio membro recebe o account_id já resolvido pelo
    provedor de identidade (ou None) e falha com Unauthenticated antes de
    tocar o banco.
    """

    def get_for(self, db: Session, *, program_id: int, account_id: int) -> Optional[ProgramAttendee]:
        return db.execute(
            select(ProgramAttendee).where(
                ProgramAttendee.program_id == program_id,
                ProgramAttendee.account_id == account_id,
            )
        ).scalar_one_or_none()

    def check_status(self, db: Session, *, program_id: int, account_id: Optional[int]) -> EnrollmentStatusOut:
        account_id = _require_account(account_id)
        att = self.get_for(db, program_id=program_id, account_id=account_id)
        if att is None:
            return EnrollmentStatusOut(is_enrolled=False, status=None, registration_date=None)
        return EnrollmentStatusOut(is_enrolled=True, status=att.status, registration_date=att.registration_date)

    def enroll(self, db: Session, *, program_id: int, account_id: Optional[int]) -> EnrollmentCreated:
        account_id = _require_account(account_id)

        program = program_crud.find_active_by_id(db, program_id)
        if program is None:
            raise NotFound("Program not found or is disabled")
        program_name = program.name

        existing = self.get_for(db, program_id=program_id, account_id=account_id)
        if existing is not None:
            logger.info("duplicate enrollment program=%s account=%s", program_id, account_id)
            raise Conflict(enrollmentStatus=existing.status)

        att = ProgramAttendee(
            program_id=program_id,
            account_id=account_id,
            registration_date=_now(),
            status=AttendeeStatus.registered.value,
        )
        db.add(att)
        try:
            db.commit()
        except IntegrityError:
            # outra requisição gravou a mesma matrícula depois da checagem
            db.rollback()
            winner = self.get_for(db, program_id=program_id, account_id=account_id)
            if winner is None:
                raise
            logger.info("enrollment race lost program=%s account=%s", program_id, account_id)
            raise Conflict(enrollmentStatus=winner.status)

        logger.info("enrolled program=%s account=%s", program_id, account_id)
        return EnrollmentCreated(program_id=program_id, program_name=program_name, status=AttendeeStatus.registered.value)

    def unenroll(self, db: Session, *, program_id: int, account_id: Optional[int]) -> UnenrollOut:
        account_id = _require_account(account_id)
        result = db.execute(
            delete(ProgramAttendee).where(
                ProgramAttendee.program_id == program_id,
                ProgramAttendee.account_id == account_id,
            )
        )
        if result.rowcount == 0:
            db.rollback()
            raise NotFound("Enrollment not found")
        db.commit()
        logger.info("unenrolled program=%s account=%s", program_id, account_id)
        return UnenrollOut(program_id=program_id)

    def list_for_account(self, db: Session, *, account_id: Optional[int]) -> EnrolledProgramList:
        account_id = _require_account(account_id)
        stmt = (
            select(Program, ProgramAttendee.registration_date, ProgramAttendee.status)
            .join(ProgramAttendee, ProgramAttendee.program_id == Program.id)
            .where(ProgramAttendee.account_id == account_id, Program.is_disabled.is_(False))
            .order_by(ProgramAttendee.registration_date.desc())
        )
        data = [
            EnrolledProgram(
                program_id=p.id,
                program_name=p.name,
                type=p.type,
                date=p.date,
                description=p.description,
                organizer=p.organizer,
                location=p.location,
                url=p.url,
                image_url=p.image_url,
                registration_date=registered_at,
                status=status,
            )
            for p, registered_at, status in db.execute(stmt).all()
        ]
        return EnrolledProgramList(data=data, total=len(data))

    # ---- relatórios ----

    def _attendee_stmt(self):
        return (
            select(
                ProgramAttendee.program_id,
                ProgramAttendee.account_id,
                ProgramAttendee.registration_date,
                ProgramAttendee.status,
                Program.name.label("program_name"),
                Account.username,
                Account.full_name,
            )
            .join(Program, Program.id == ProgramAttendee.program_id)
            .join(Account, Account.id == ProgramAttendee.account_id)
        )

    def list_attendees(self, db: Session, program_id: Optional[int] = None) -> List[AttendeeView]:
        stmt = self._attendee_stmt()
        if program_id is not None:
            stmt = stmt.where(ProgramAttendee.program_id == program_id)
        stmt = stmt.order_by(ProgramAttendee.registration_date.desc())
        return [AttendeeView.model_validate(dict(r._mapping)) for r in db.execute(stmt).all()]

    def get_attendee(self, db: Session, *, program_id: int, account_id: int) -> AttendeeView:
        row = db.execute(
            self._attendee_stmt().where(
                ProgramAttendee.program_id == program_id,
                ProgramAttendee.account_id == account_id,
            )
        ).first()
        if row is None:
            raise NotFound("Attendee not found")
        return AttendeeView.model_validate(dict(row._mapping))

    def count_by_program(self, db: Session, program_id: int) -> int:
        return db.scalar(
            select(func.count()).select_from(ProgramAttendee).where(ProgramAttendee.program_id == program_id)
        ) or 0

attendee_crud = CRUDAttendee(ProgramAttendee)
