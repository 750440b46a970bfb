# backend/models/users.py
from sqlalchemy import Column, Integer, String, DateTime, func
from database import Base

# Represents a user account; role is either "admin" or "user"
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
