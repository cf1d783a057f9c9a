from enum import Enum
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import ForeignKey, String, UniqueConstraint, DateTime
from counsel_api.db.base_class import Base

class AttendeeStatus(str, Enum):
    registered = "registered"

class ProgramAttendee(Base):
    """Uma linha por matrícula (programa, conta)."""

    __tablename__ = "community_program_attendees"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    program_id: Mapped[int] = mapped_column(ForeignKey("community_programs.id", ondelete="CASCADE"), index=True)
    account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id", ondelete="CASCADE"), index=True)
    registration_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    # String e não Enum: outros módulos da plataforma podem gravar outros status
    status: Mapped[str] = mapped_column(String(20), default=AttendeeStatus.registered.value)

    program = relationship("Program", back_populates="attendees")
    account = relationship("Account")

    __table_args__ = (UniqueConstraint("program_id", "account_id", name="uq_attendee_program_account"),)
