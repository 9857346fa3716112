# blush/routers/users_routes.py

from fastapi import APIRouter, Depends
from sqlmodel import Session

from blush.db import get_session
from blush.schemas import RegisterRequest, Message
from blush import credentials

router = APIRouter(
    prefix="/api",
    tags=["users"],
)


@router.post("/register", status_code=201, response_model=Message)
def register(
    user: RegisterRequest,
    session: Session = Depends(get_session),
):
    message = credentials.register(
        session, user.name, user.email, user.password
    ).unwrap()
    return {"message": message}
