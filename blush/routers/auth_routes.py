# blush/routers/auth_routes.py

from fastapi import APIRouter, Depends
from sqlmodel import Session

from blush.db import get_session
from blush.schemas import LoginRequest, LoginResponse
from blush import credentials

router = APIRouter(
    prefix="/api",
    tags=["auth"],
)


@router.post("/login", response_model=LoginResponse)
def login(
    form: LoginRequest,
    session: Session = Depends(get_session),
):
    user = credentials.login(session, form.email, form.password).unwrap()
    return {"message": "Login successful!", "user": user}
