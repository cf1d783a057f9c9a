from counsel_api.models.account import Account
from counsel_api.models.program import Program
from counsel_api.models.attendee import ProgramAttendee, AttendeeStatus

__all__ = ["Account", "Program", "ProgramAttendee", "AttendeeStatus"]
