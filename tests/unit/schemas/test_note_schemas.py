"""Validation rules on request schemas."""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from jotter.core.schemas.auth import RegisterRequest
from jotter.core.schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate


def test_note_create_accepts_missing_content():
    note = NoteCreate(title="Groceries")
    assert note.content is None


@pytest.mark.parametrize("title", ["", "   "])
def test_note_create_rejects_blank_title(title):
    with pytest.raises(ValidationError):
        NoteCreate(title=title, content="c")


def test_note_create_leaves_length_limits_to_settings():
    note = NoteCreate(title="t" * 201, content="c" * 10_001)
    assert len(note.title) == 201
    assert len(note.content) == 10_001


def test_note_update_requires_title():
    with pytest.raises(ValidationError):
        NoteUpdate(content="only content")


def test_register_request_normalizes_email():
    req = RegisterRequest(username="alice", email="Alice@Example.COM", password="Password123!")
    assert req.email == "alice@example.com"


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "al", "email": "a@example.com", "password": "Password123!"},
        {"username": "bad name!", "email": "a@example.com", "password": "Password123!"},
        {"username": "alice", "email": "not-an-email", "password": "Password123!"},
        {"username": "alice", "email": "a@example.com", "password": "short"},
    ],
)
def test_register_request_rejects_bad_input(payload):
    with pytest.raises(ValidationError):
        RegisterRequest(**payload)


def _note_response(title: str) -> NoteResponse:
    now = datetime.now(timezone.utc)
    return NoteResponse(
        id=uuid.uuid4(), owner_id="u1", title=title, content=None, created_at=now, updated_at=now
    )


def test_list_response_page_count():
    res = NoteListResponse.create(items=[_note_response("a")], total=21, page=3, page_size=10)
    assert res.pages == 3
    assert res.page == 3 and res.page_size == 10


def test_list_response_without_pagination():
    res = NoteListResponse.create(items=[_note_response("a")], total=1)
    assert res.pages is None
    assert res.page is None and res.page_size is None
