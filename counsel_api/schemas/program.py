from typing import Optional
from datetime import datetime
from counsel_api.schemas.common import CamelModel

class ProgramOut(CamelModel):
    program_id: int
    program_name: str
    type: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    organizer: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None
    is_disabled: bool = False
