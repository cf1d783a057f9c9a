import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

from counsel_api.core.errors import Conflict, NotFound, Unauthenticated
from counsel_api.crud.enrollment import CRUDAttendee, attendee_crud
from counsel_api.db.base import Base
from counsel_api.models.account import Account
from counsel_api.models.program import Program
from counsel_api.models.attendee import ProgramAttendee


def _rows(db, program_id, account_id):
    return db.scalar(
        select(func.count()).select_from(ProgramAttendee).where(
            ProgramAttendee.program_id == program_id,
            ProgramAttendee.account_id == account_id,
        )
    )


def test_enroll_then_status_reports_registered(db):
    created = attendee_crud.enroll(db, program_id=10, account_id=1)
    assert created.program_id == 10
    assert created.program_name == "Parenting Workshop"
    assert created.status == "registered"

    st = attendee_crud.check_status(db, program_id=10, account_id=1)
    assert st.is_enrolled is True
    assert st.status == "registered"
    assert st.registration_date is not None


def test_status_for_unknown_pair_is_not_enrolled(db):
    st = attendee_crud.check_status(db, program_id=11, account_id=2)
    assert st.is_enrolled is False
    assert st.status is None
    assert st.registration_date is None


def test_second_enroll_conflicts_and_keeps_single_row(db):
    attendee_crud.enroll(db, program_id=10, account_id=1)
    with pytest.raises(Conflict) as exc:
        attendee_crud.enroll(db, program_id=10, account_id=1)
    assert exc.value.extra == {"enrollmentStatus": "registered"}
    assert _rows(db, 10, 1) == 1


def test_unique_constraint_catches_race_past_precheck(db, monkeypatch):
    attendee_crud.enroll(db, program_id=11, account_id=2)

    real_get_for = CRUDAttendee.get_for
    calls = {"n": 0}

    def stale_precheck(self, session, **kw):
        # a primeira consulta enxerga o banco antes do commit da outra requisição
        calls["n"] += 1
        if calls["n"] == 1:
            return None
        return real_get_for(self, session, **kw)

    monkeypatch.setattr(CRUDAttendee, "get_for", stale_precheck)

    with pytest.raises(Conflict) as exc:
        attendee_crud.enroll(db, program_id=11, account_id=2)
    assert exc.value.extra["enrollmentStatus"] == "registered"
    assert _rows(db, 11, 2) == 1


def test_concurrent_enrolls_leave_exactly_one_row(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'race.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    with factory() as db:
        db.add(Account(id=1, username="alice"))
        db.add(Program(id=10, name="Parenting Workshop"))
        db.commit()

    workers = 8
    barrier = threading.Barrier(workers)

    def attempt():
        with factory() as db:
            barrier.wait()
            try:
                attendee_crud.enroll(db, program_id=10, account_id=1)
                return "ok"
            except Conflict:
                return "conflict"

    try:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = [f.result() for f in [pool.submit(attempt) for _ in range(workers)]]
        with factory() as db:
            assert _rows(db, 10, 1) == 1
    finally:
        engine.dispose()

    assert sorted(outcomes) == ["conflict"] * (workers - 1) + ["ok"]


@pytest.mark.parametrize("program_id", [12, 999])
def test_enroll_into_disabled_or_missing_program(db, program_id):
    with pytest.raises(NotFound):
        attendee_crud.enroll(db, program_id=program_id, account_id=1)
    assert _rows(db, program_id, 1) == 0


def test_unenroll_without_enrollment_is_not_found(db):
    with pytest.raises(NotFound):
        attendee_crud.unenroll(db, program_id=10, account_id=1)


def test_enroll_unenroll_roundtrip(db):
    attendee_crud.enroll(db, program_id=10, account_id=1)
    out = attendee_crud.unenroll(db, program_id=10, account_id=1)
    assert out.program_id == 10
    assert attendee_crud.check_status(db, program_id=10, account_id=1).is_enrolled is False
    with pytest.raises(NotFound):
        attendee_crud.unenroll(db, program_id=10, account_id=1)


@pytest.mark.parametrize("op", ["check_status", "enroll", "unenroll"])
def test_missing_identity_fails_before_touching_storage(op):
    # db=None: qualquer acesso ao banco estouraria AttributeError
    with pytest.raises(Unauthenticated):
        getattr(attendee_crud, op)(None, program_id=10, account_id=None)


def test_my_programs_most_recent_first(db, monkeypatch):
    t1 = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)
    t2 = datetime(2026, 10, 5, 9, 0, tzinfo=timezone.utc)

    monkeypatch.setattr("counsel_api.crud.enrollment._now", lambda: t1)
    attendee_crud.enroll(db, program_id=10, account_id=1)
    monkeypatch.setattr("counsel_api.crud.enrollment._now", lambda: t2)
    attendee_crud.enroll(db, program_id=11, account_id=1)

    mine = attendee_crud.list_for_account(db, account_id=1)
    assert mine.total == 2
    assert [p.program_id for p in mine.data] == [11, 10]


def test_my_programs_hides_disabled_programs(db):
    db.add(ProgramAttendee(program_id=12, account_id=1, status="registered",
                           registration_date=datetime(2025, 1, 1, tzinfo=timezone.utc)))
    db.commit()
    attendee_crud.enroll(db, program_id=10, account_id=1)

    mine = attendee_crud.list_for_account(db, account_id=1)
    assert [p.program_id for p in mine.data] == [10]
    assert mine.total == 1


def test_reporting_views(db):
    attendee_crud.enroll(db, program_id=10, account_id=1)
    attendee_crud.enroll(db, program_id=10, account_id=2)
    attendee_crud.enroll(db, program_id=11, account_id=2)

    assert attendee_crud.count_by_program(db, 10) == 2
    assert attendee_crud.count_by_program(db, 999) == 0
    assert len(attendee_crud.list_attendees(db)) == 3
    assert {a.account_id for a in attendee_crud.list_attendees(db, program_id=10)} == {1, 2}

    view = attendee_crud.get_attendee(db, program_id=11, account_id=2)
    assert view.username == "bob"
    assert view.program_name == "Stress Management Talk"

    with pytest.raises(NotFound):
        attendee_crud.get_attendee(db, program_id=11, account_id=1)
