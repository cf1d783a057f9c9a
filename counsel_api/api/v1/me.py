from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from counsel_api.api.deps import get_db, get_current_account_id
from counsel_api.crud.enrollment import attendee_crud
from counsel_api.schemas.enrollment import EnrolledProgramList

router = APIRouter()

@router.get("/programs", response_model=EnrolledProgramList)
def my_enrolled_programs(
    db: Session = Depends(get_db),
    account_id: Optional[int] = Depends(get_current_account_id),
):
    return attendee_crud.list_for_account(db, account_id=account_id)
