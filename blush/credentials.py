# blush/credentials.py

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from .auth import hash_password, password_too_long, verify_password
from .errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    Result,
    ValidationError,
)
from .models import User

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid email or password."


def register(session: Session, name, email, password) -> Result[str]:
    """Create a user account with a bcrypt-hashed password.

    Emails are matched exactly. The lookup before insert only gives a nicer
    error; the unique index on users.email settles races.
    """
    if not name or not email or not password:
        return Result.failure(ValidationError("All fields are required."))
    if password_too_long(password):
        return Result.failure(ValidationError("Password must be at most 72 bytes."))

    # 1) Check if email already exists
    try:
        existing = session.exec(
            select(User).where(User.email == email)
        ).first()
        if existing is not None:
            logger.info("Registration rejected: email already exists")
            return Result.failure(ConflictError("Email already exists."))

        # 2) Create user in DB
        db_user = User(name=name, email=email, password_hash=hash_password(password))
        session.add(db_user)
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.info("Registration rejected by unique email index")
            return Result.failure(ConflictError("Email already exists."))

        session.refresh(db_user)  # fills db_user.id
        user_id = db_user.id
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Register error")
        return Result.failure(InternalError("Server error during registration."))

    logger.info("Registered user id=%s", user_id)
    return Result.success("User registered successfully!")


def login(session: Session, email, password) -> Result[dict]:
    if not email or not password:
        return Result.failure(AuthenticationError(INVALID_CREDENTIALS))

    try:
        user = session.exec(
            select(User).where(User.email == email)
        ).first()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Login error")
        return Result.failure(InternalError("Server error during login."))

    if user is None or not verify_password(password, user.password_hash):
        return Result.failure(AuthenticationError(INVALID_CREDENTIALS))

    return Result.success({"name": user.name, "email": user.email})
