# blush/routers/appointments_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from blush.db import get_session
from blush.schemas import AppointmentCreate, AppointmentPublic, Message
from blush import bookings

router = APIRouter(
    prefix="/api",
    tags=["appointments"],
)


@router.post("/appointment", response_model=Message, status_code=201)
def create_appointment(
    appt: AppointmentCreate,
    session: Session = Depends(get_session),
):
    bookings.book(
        session,
        name=appt.name,
        email=appt.email,
        services=appt.services,
        parlour=appt.parlour,
        date=appt.date,
        time=appt.time,
    ).unwrap()
    return {"message": "Appointment booked successfully!"}


@router.get("/appointments", response_model=List[AppointmentPublic])
def list_appointments(session: Session = Depends(get_session)):
    return bookings.list_all(session).unwrap()
