# tests/test_credentials.py

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from blush import credentials
from blush.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    ValidationError,
)
from blush.models import User


def test_register_persists_hashed_password(session):
    result = credentials.register(session, "Ada", "ada@example.com", "s3cret")

    assert result.ok
    assert result.value == "User registered successfully!"
    user = session.exec(select(User)).one()
    assert user.name == "Ada"
    assert user.email == "ada@example.com"
    assert user.password_hash != "s3cret"


def test_register_twice_conflicts(session):
    assert credentials.register(session, "Ada", "ada@example.com", "s3cret").ok

    result = credentials.register(session, "Ada Again", "ada@example.com", "other")

    assert not result.ok
    assert isinstance(result.error, ConflictError)
    assert result.error.message == "Email already exists."
    assert len(session.exec(select(User)).all()) == 1


def test_email_match_is_exact(session):
    assert credentials.register(session, "Ada", "ada@example.com", "s3cret").ok
    assert credentials.register(session, "Ada", "Ada@example.com", "s3cret").ok


def test_unique_index_catches_race(session, monkeypatch):
    assert credentials.register(session, "Ada", "ada@example.com", "s3cret").ok

    # Simulate a concurrent request that passed the lookup before our insert
    real_exec = session.exec
    calls = []

    def blind_exec(stmt, *args, **kwargs):
        result = real_exec(stmt, *args, **kwargs)
        calls.append(stmt)

        class Empty:
            def first(self):
                return None

        return Empty() if len(calls) == 1 else result

    monkeypatch.setattr(session, "exec", blind_exec)
    result = credentials.register(session, "Ada", "ada@example.com", "s3cret")

    assert isinstance(result.error, ConflictError)


@pytest.mark.parametrize(
    "name,email,password",
    [
        (None, "ada@example.com", "s3cret"),
        ("Ada", None, "s3cret"),
        ("Ada", "ada@example.com", None),
        ("", "ada@example.com", "s3cret"),
        ("Ada", "", "s3cret"),
        ("Ada", "ada@example.com", ""),
    ],
)
def test_register_requires_all_fields(session, name, email, password):
    result = credentials.register(session, name, email, password)

    assert isinstance(result.error, ValidationError)
    assert result.error.message == "All fields are required."
    assert session.exec(select(User)).all() == []


def test_register_rejects_password_over_bcrypt_limit(session):
    result = credentials.register(session, "Ada", "ada@example.com", "x" * 73)

    assert isinstance(result.error, ValidationError)
    assert session.exec(select(User)).all() == []


def test_login_returns_public_fields_only(session):
    credentials.register(session, "Ada", "ada@example.com", "s3cret")

    result = credentials.login(session, "ada@example.com", "s3cret")

    assert result.ok
    assert result.value == {"name": "Ada", "email": "ada@example.com"}


def test_login_failures_look_the_same(session):
    credentials.register(session, "Ada", "ada@example.com", "s3cret")

    wrong_password = credentials.login(session, "ada@example.com", "nope")
    unknown_email = credentials.login(session, "bob@example.com", "s3cret")

    for result in (wrong_password, unknown_email):
        assert isinstance(result.error, AuthenticationError)
        assert result.error.message == "Invalid email or password."


def test_login_without_credentials_fails(session):
    result = credentials.login(session, None, None)
    assert isinstance(result.error, AuthenticationError)


def test_store_failure_is_internal_error(session, monkeypatch):
    def broken_exec(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(session, "exec", broken_exec)

    register = credentials.register(session, "Ada", "ada@example.com", "s3cret")
    login = credentials.login(session, "ada@example.com", "s3cret")

    assert isinstance(register.error, InternalError)
    assert register.error.message == "Server error during registration."
    assert isinstance(login.error, InternalError)
    assert login.error.message == "Server error during login."


def test_store_failure_after_commit_is_internal_error(session, monkeypatch):
    def broken_refresh(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection dropped"))

    monkeypatch.setattr(session, "refresh", broken_refresh)

    result = credentials.register(session, "Ada", "ada@example.com", "s3cret")

    assert isinstance(result.error, InternalError)
    assert result.error.message == "Server error during registration."
