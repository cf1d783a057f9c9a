from __future__ import annotations
from typing import List, Optional
from datetime import datetime
from counsel_api.schemas.common import CamelModel

# ---------------------------
# Matrícula do membro autenticado
# ---------------------------

class EnrollmentStatusOut(CamelModel):
    is_enrolled: bool
    status: Optional[str] = None
    registration_date: Optional[datetime] = None

class EnrollmentCreated(CamelModel):
    message: str = "Successfully enrolled in program"
    program_id: int
    program_name: str
    status: str

class UnenrollOut(CamelModel):
    message: str = "Successfully unenrolled from program"
    program_id: int

class EnrolledProgram(CamelModel):
    program_id: int
    program_name: str
    type: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    organizer: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None
    registration_date: datetime
    status: str

class EnrolledProgramList(CamelModel):
    data: List[EnrolledProgram]
    total: int

# ---------------------------
# Relatórios
# ---------------------------

class AttendeeView(CamelModel):
    program_id: int
    account_id: int
    registration_date: datetime
    status: str
    program_name: str
    username: str
    full_name: Optional[str] = None

class AttendeeCount(CamelModel):
    total: int
