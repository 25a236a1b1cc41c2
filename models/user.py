import uuid
from sqlalchemy import Column, String
from models.base import Base, TimestampMixin

ROLES = ("admin", "editor", "viewer")

class User(Base, TimestampMixin):
    __tablename__ = "user"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(64), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(16), default="editor", nullable=False)
