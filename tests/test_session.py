"""Tests for session construction and deadline handling."""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from influxlite.session import Session


def test_series_url_and_credentials(session):
    assert session.series_url == "http://db.example:8086/db/metrics/series"
    assert session.credentials() == {"u": "root", "p": "secret"}


def test_no_timeout_by_default(session):
    assert session.timeout_s is None


def test_session_is_immutable(session):
    with pytest.raises(ValidationError):
        session.host = "elsewhere"


def test_password_not_in_repr(session):
    assert "secret" not in repr(session)
    assert "db.example" in repr(session)


def test_negative_timeout_rejected():
    with pytest.raises(ValidationError):
        Session(host="h", database="d", timeout_s=-1)


def test_from_deadline_captures_remaining_time():
    now = datetime(2024, 1, 1, 12, 0, 0)
    session = Session.from_deadline(
        "h", "d", "u", "p",
        deadline=now + timedelta(seconds=30),
        now=now
    )
    assert session.timeout_s == pytest.approx(30.0)


def test_from_deadline_is_a_snapshot():
    """The timeout is computed once; later use does not re-check the deadline."""
    deadline = datetime.now(timezone.utc) + timedelta(seconds=60)
    session = Session.from_deadline("h", "d", deadline=deadline)
    first = session.timeout_s

    assert 0 < first <= 60
    assert session.timeout_s == first


def test_from_deadline_expired():
    """An expired deadline gives no timeout at all rather than a zero one."""
    now = datetime(2024, 1, 1, 12, 0, 0)
    for expired in (now - timedelta(seconds=5), now):
        session = Session.from_deadline("h", "d", deadline=expired, now=now)
        assert session.timeout_s is None


def test_zero_timeout_rejected():
    with pytest.raises(ValidationError):
        Session(host="h", database="d", timeout_s=0)


def test_from_deadline_without_deadline():
    session = Session.from_deadline("h", "d", "u", "p")
    assert session.timeout_s is None
    assert session.username == "u"
