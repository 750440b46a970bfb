# backend/routes/auth.py
from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from sqlalchemy import func

from utils.hashing import get_password_hash, verify_password
from utils.tokenJWT import create_access_token, get_current_user, is_admin
from utils.audit import write_log, client_ip
from models import users as models
from schemas import user as schemas
from database import get_db

router = APIRouter(tags=["Auth"])


def _user_out(user: models.User) -> schemas.UserResponse:
    return schemas.UserResponse(id=user.id, email=user.email, role=user.role, is_admin=is_admin(user))


# Register a new user; admins are promoted directly in the database
@router.post("/register", response_model=schemas.UserResponse, status_code=201)
def register(user: schemas.UserCreate, request: Request, db: Session = Depends(get_db)):
    normalized_email = user.email.strip().lower()

    db_user = db.query(models.User).filter(func.lower(models.User.email) == normalized_email).first()
    if db_user:
        write_log(db, user_id=None, action="REGISTER", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": normalized_email, "reason": "Email exists"})
        raise HTTPException(status_code=400, detail="Email already registered")

    new_user = models.User(email=normalized_email, password_hash=get_password_hash(user.password), role="user")
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    write_log(db, user_id=new_user.id, action="REGISTER", resource="auth", status="SUCCESS",
              ip=client_ip(request), meta={"email": new_user.email})
    return _user_out(new_user)


# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.UserLogin, request: Request, db: Session = Depends(get_db)):
    email = payload.email.strip().lower()
    db_user = db.query(models.User).filter(models.User.email == email).first()

    if not db_user or not verify_password(payload.password, db_user.password_hash):
        write_log(db, user_id=(db_user.id if db_user else None), action="LOGIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": email})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    access_token = create_access_token(data={"sub": db_user.email, "role": db_user.role})

    write_log(db, user_id=db_user.id, action="LOGIN", resource="auth",
              status="SUCCESS", ip=client_ip(request), meta={"email": db_user.email})
    return {"access_token": access_token, "token_type": "bearer"}


# Current user, including the admin capability flag used by the UI
@router.get("/me", response_model=schemas.UserResponse)
def me(current_user: models.User = Depends(get_current_user)):
    return _user_out(current_user)
