# enrollment_approvals/api/v1/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from sqlalchemy import select

from enrollment_approvals.api.deps import get_db, get_current_user
from enrollment_approvals.core.tokens import create_access_token
from enrollment_approvals.core.security import verify_and_maybe_upgrade
from enrollment_approvals.models.user import User
from enrollment_approvals.schemas.token import LoginIn, Token
from enrollment_approvals.schemas.user import UserOut

router = APIRouter()

# ---------- helpers ----------
def normalize_email(email: str) -> str:
    return (email or "").strip().lower()

def _authenticate(db: Session, email: str, password: str) -> User:
    user = db.execute(select(User).where(User.email == normalize_email(email))).scalar_one_or_none()
    if not user or user.status != "active":
        raise HTTPException(status_code=401, detail="Credenciales inválidas.")

    ok, new_hash = verify_and_maybe_upgrade(password, user.hashed_password)
    if not ok:
        raise HTTPException(status_code=401, detail="Credenciales inválidas.")
    if new_hash:
        user.hashed_password = new_hash
        db.add(user); db.commit()
    return user

def _issue(user: User) -> Token:
    return Token(access_token=create_access_token(sub=user.email, role=user.role))

# ---------- endpoints ----------
@router.post("/login", response_model=Token)
def login(body: LoginIn, db: Session = Depends(get_db)):
    return _issue(_authenticate(db, body.email, body.password))

@router.post("/token", response_model=Token)
def login_oauth2_form(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    if not form.username or not form.password:
        raise HTTPException(status_code=400, detail="Correo y contraseña son obligatorios.")
    return _issue(_authenticate(db, form.username, form.password))

@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user
