# utils/tokenJWT.py
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models import users as models
from schemas.user import TokenData

# Bearer token is mandatory for admin-only routes and optional elsewhere,
# where it only attributes audit entries to a user
bearer_scheme = HTTPBearer()
optional_bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise _unauthorized()
    claims = TokenData(email=payload.get("sub"), role=payload.get("role"))
    if claims.email is None:
        raise _unauthorized()
    return claims


def _user_from_token(token: str, db: Session) -> models.User:
    claims = decode_token(token)
    # Role is read from the database so a demotion takes effect before the token expires
    user = db.query(models.User).filter(models.User.email == claims.email).first()
    if user is None:
        raise _unauthorized()
    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    return _user_from_token(credentials.credentials, db)


# Anonymous requests get None instead of 401
def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[models.User]:
    if credentials is None:
        return None
    return _user_from_token(credentials.credentials, db)


def is_admin(user: Optional[models.User]) -> bool:
    return user is not None and (user.role or "").lower() == "admin"
