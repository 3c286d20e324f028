from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vendorhub.auth import (
    MIN_PASSWORD_LENGTH,
    CurrentUser,
    authenticate_user,
    create_access_token,
    get_current_user,
    register_user,
)
from vendorhub.db import get_db
from vendorhub.errors import ServiceError, to_http_exception
from vendorhub.models import User
from vendorhub.responses import envelope

router = APIRouter(prefix="/api/auth", tags=["auth"])


class RegisterPayload(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class LoginPayload(BaseModel):
    email: str
    password: str


def _serialize_user(user: User | CurrentUser) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email}


def _issue_token(request: Request, user: User) -> str:
    return create_access_token(request.app.state.settings, {"sub": str(user.id), "name": user.name})


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterPayload, request: Request, db: Session = Depends(get_db)):
    try:
        user = register_user(db, payload.name, payload.email, payload.password)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    db.refresh(user)
    return envelope(
        data={"token": _issue_token(request, user), "user": _serialize_user(user)},
        message="User registered successfully",
    )


@router.post("/login")
def login(payload: LoginPayload, request: Request, db: Session = Depends(get_db)):
    user = authenticate_user(db, payload.email, payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return envelope(data={"token": _issue_token(request, user), "user": _serialize_user(user)})


@router.get("/me")
def me(current_user: CurrentUser = Depends(get_current_user)):
    return envelope(data=_serialize_user(current_user))
