# counsel_api/api/v1/programs.py
from __future__ import annotations

from typing import List, Optional
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from counsel_api.api.deps import get_db, get_current_account_id, require_account_id
from counsel_api.core.config import MAX_ID
from counsel_api.core.errors import NotFound
from counsel_api.crud.enrollment import attendee_crud
from counsel_api.crud.program import program_crud
from counsel_api.models.program import Program as ProgramModel
from counsel_api.schemas.program import ProgramOut
from counsel_api.schemas.enrollment import (
    AttendeeCount,
    AttendeeView,
    EnrollmentCreated,
    EnrollmentStatusOut,
    UnenrollOut,
)

router = APIRouter()

def _program_out(p: ProgramModel) -> ProgramOut:
    return ProgramOut(
        program_id=p.id,
        program_name=p.name,
        **{k: getattr(p, k) for k in ("type", "date", "description", "organizer", "location", "url", "image_url", "is_disabled")},
    )

# ---------------------------
# Catálogo (público)
# ---------------------------

@router.get("", response_model=List[ProgramOut])
def list_programs(db: Session = Depends(get_db)):
    return [_program_out(p) for p in program_crud.list_active(db)]

# /attendees precisa vir antes de /{program_id}
@router.get("/attendees", response_model=List[AttendeeView])
def list_all_attendees(db: Session = Depends(get_db), _: int = Depends(require_account_id)):
    return attendee_crud.list_attendees(db)

@router.get("/{program_id}", response_model=ProgramOut)
def get_program(program_id: int = Path(gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    p = program_crud.find_active_by_id(db, program_id)
    if p is None:
        raise NotFound("Program not found")
    return _program_out(p)

# ---------------------------
# Matrícula do membro autenticado
# ---------------------------

@router.get("/{program_id}/attendees/status", response_model=EnrollmentStatusOut)
def check_enrollment_status(
    program_id: int = Path(gt=0, le=MAX_ID),
    db: Session = Depends(get_db),
    account_id: Optional[int] = Depends(get_current_account_id),
):
    return attendee_crud.check_status(db, program_id=program_id, account_id=account_id)

@router.post("/{program_id}/enroll", response_model=EnrollmentCreated, status_code=status.HTTP_201_CREATED)
def enroll_in_program(
    program_id: int = Path(gt=0, le=MAX_ID),
    db: Session = Depends(get_db),
    account_id: Optional[int] = Depends(get_current_account_id),
):
    return attendee_crud.enroll(db, program_id=program_id, account_id=account_id)

@router.delete("/{program_id}/enroll", response_model=UnenrollOut)
def unenroll_from_program(
    program_id: int = Path(gt=0, le=MAX_ID),
    db: Session = Depends(get_db),
    account_id: Optional[int] = Depends(get_current_account_id),
):
    return attendee_crud.unenroll(db, program_id=program_id, account_id=account_id)

# ---------------------------
# Relatórios
# ---------------------------

# literais (status, count) antes de /{account_id}
@router.get("/{program_id}/attendees/count", response_model=AttendeeCount)
def count_attendees(program_id: int = Path(gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    return AttendeeCount(total=attendee_crud.count_by_program(db, program_id))

@router.get("/{program_id}/attendees", response_model=List[AttendeeView])
def list_program_attendees(program_id: int = Path(gt=0, le=MAX_ID), db: Session = Depends(get_db), _: int = Depends(require_account_id)):
    return attendee_crud.list_attendees(db, program_id=program_id)

@router.get("/{program_id}/attendees/{account_id}", response_model=AttendeeView)
def get_attendee(
    program_id: int = Path(gt=0, le=MAX_ID),
    account_id: int = Path(gt=0, le=MAX_ID),
    db: Session = Depends(get_db),
    _: int = Depends(require_account_id),
):
    return attendee_crud.get_attendee(db, program_id=program_id, account_id=account_id)
