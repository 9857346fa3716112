# blush/bookings.py

import logging
import re
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from .errors import (
    InternalError,
    PastTimeError,
    Result,
    SlotConflictError,
    ValidationError,
)
from .models import Appointment

logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")

SLOT_TAKEN = "This slot is already booked at this parlour."


def parse_slot(date: str, time: str) -> Optional[datetime]:
    """Combine YYYY-MM-DD and HH:MM into a naive local datetime, or None."""
    if not isinstance(date, str) or not isinstance(time, str):
        return None
    if not DATE_RE.fullmatch(date) or not TIME_RE.fullmatch(time):
        return None
    try:
        return datetime.strptime(f"{date}T{time}", "%Y-%m-%dT%H:%M")
    except ValueError:
        return None


def find_slot(session: Session, parlour: str, date: str, time: str) -> Optional[Appointment]:
    return session.exec(
        select(Appointment)
        .where(Appointment.parlour == parlour)
        .where(Appointment.date == date)
        .where(Appointment.time == time)
    ).first()


def book(
    session: Session,
    name,
    email,
    services,
    parlour,
    date,
    time,
    now: Optional[datetime] = None,
) -> Result[Appointment]:
    # 1) Validate required fields (an empty services list is fine, a missing one is not)
    if not name or not email or services is None or not parlour or not date or not time:
        return Result.failure(ValidationError("All fields are required."))
    if not isinstance(services, (list, tuple)) or not all(isinstance(s, str) for s in services):
        return Result.failure(ValidationError("Services must be a list of strings."))

    # 2) Validate date and time format
    starts_at = parse_slot(date, time)
    if starts_at is None:
        return Result.failure(ValidationError("Invalid date or time format."))

    # 3) Prevent booking in the past (naive local time)
    if now is None:
        now = datetime.now()
    if starts_at <= now:
        return Result.failure(PastTimeError("Cannot book for a past time."))

    # 4) Prevent duplicate slot; the unique constraint has the final say
    try:
        if find_slot(session, parlour, date, time) is not None:
            logger.info("Slot %s %s already booked at %s", date, time, parlour)
            return Result.failure(SlotConflictError(SLOT_TAKEN))

        # 5) Create and save appointment
        db_appt = Appointment(
            name=name,
            email=email,
            services=list(dict.fromkeys(services)),
            parlour=parlour,
            date=date,
            time=time,
        )
        session.add(db_appt)
        try:
            session.commit()
        except IntegrityError:
            # Lost the race to a concurrent booking of the same slot
            session.rollback()
            logger.info("Slot %s %s at %s taken by a concurrent booking", date, time, parlour)
            return Result.failure(SlotConflictError(SLOT_TAKEN))

        session.refresh(db_appt)  # fills db_appt.id
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Appointment error")
        return Result.failure(InternalError("Error booking appointment."))

    logger.info("Booked appointment id=%s at %s on %s %s", db_appt.id, parlour, date, time)
    return Result.success(db_appt)


def list_all(session: Session) -> Result[List[Appointment]]:
    stmt = select(Appointment).order_by(Appointment.date, Appointment.time, Appointment.id)
    try:
        appts = session.exec(stmt).all()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Fetch error")
        return Result.failure(InternalError("Error fetching appointments."))
    return Result.success(list(appts))
