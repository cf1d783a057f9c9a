# counsel_api/db/init_db.py
import logging
from datetime import datetime, timedelta, timezone
from sqlalchemy import select
from sqlalchemy.orm import Session

from counsel_api.models.account import Account
from counsel_api.models.program import Program

logger = logging.getLogger(__name__)

DEMO_PROGRAMS = [
    {"name": "Mindful Parenting Workshop", "type": "workshop", "organizer": "Family Counseling Team", "location": "Room 101"},
    {"name": "Youth Drug Awareness Talk", "type": "seminar", "organizer": "Prevention Office", "location": "Main Hall"},
]

def init_db(db: Session) -> None:
    """Seed idempotente: uma conta demo e alguns programas ativos."""
    demo = db.scalar(select(Account).where(Account.username == "demo"))
    if not demo:
        db.add(Account(username="demo", full_name="Demo Member", email="demo@example.org"))
        db.flush()

    start = datetime.now(timezone.utc) + timedelta(days=7)
    for i, data in enumerate(DEMO_PROGRAMS):
        exists = db.scalar(select(Program.id).where(Program.name == data["name"]))
        if exists:
            continue
        db.add(Program(date=start + timedelta(days=7 * i), **data))

    db.commit()
    logger.info("seed complete")
