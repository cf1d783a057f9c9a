from typing import Optional
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Boolean, DateTime, false
from counsel_api.db.base_class import Base

class Program(Base):
    __tablename__ = "community_programs"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    type: Mapped[Optional[str]] = mapped_column(String(60), nullable=True)
    date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    organizer: Mapped[Optional[str]] = mapped_column(String(160), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_disabled: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())

    attendees = relationship("ProgramAttendee", back_populates="program", cascade="all, delete-orphan")
