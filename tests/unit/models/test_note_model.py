"""Tests for the Note/User models and the column types they use."""

import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy.dialects import postgresql, sqlite

from jotter.core.models import Note, User
from jotter.core.models.types import GUID, UTCDateTime, utcnow


def test_note_table_shape():
    columns = Note.__table__.columns
    assert set(columns.keys()) == {
        "id", "owner_id", "title", "content", "created_at", "updated_at",
    }
    assert columns["content"].nullable is True
    assert columns["title"].nullable is False
    assert columns["owner_id"].nullable is False
    # no foreign key: owner is an opaque identity in either mode
    assert not columns["owner_id"].foreign_keys


def test_note_listing_index():
    indexes = {idx.name: [c.name for c in idx.columns] for idx in Note.__table__.indexes}
    assert indexes["idx_notes_owner_created"] == ["owner_id", "created_at"]


def test_user_unique_columns():
    columns = User.__table__.columns
    assert columns["username"].unique is True
    assert columns["email"].unique is True


def test_note_repr_truncates_title():
    note = Note(owner_id="u1", title="x" * 40)
    assert repr(note) == f"<Note(title='{'x' * 30}...', owner_id=u1)>"


def test_user_identity_is_string_id():
    user = User(id=uuid.uuid4(), username="a", email="a@example.com", password_hash="h")
    assert user.identity == str(user.id)


def test_guid_roundtrip_on_sqlite():
    guid = GUID()
    dialect = sqlite.dialect()
    value = uuid.uuid4()
    stored = guid.process_bind_param(value, dialect)
    assert stored == str(value)
    assert guid.process_result_value(stored, dialect) == value


def test_guid_passes_uuid_through_on_postgres():
    guid = GUID()
    value = uuid.uuid4()
    assert guid.process_bind_param(str(value), postgresql.dialect()) == value


def test_utc_datetime_tags_naive_values():
    col = UTCDateTime()
    naive = datetime(2025, 1, 1, 12, 0, 0)
    loaded = col.process_result_value(naive, sqlite.dialect())
    assert loaded.tzinfo is not None
    assert loaded == datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_utc_datetime_normalises_offsets():
    col = UTCDateTime()
    plus_two = datetime(2025, 1, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    stored = col.process_bind_param(plus_two, sqlite.dialect())
    assert stored.utcoffset() == timedelta(0)
    assert stored.hour == 12


def test_utcnow_is_aware():
    assert utcnow().tzinfo is timezone.utc
