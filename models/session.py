import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from models.base import Base, TimestampMixin

class AuthSession(Base, TimestampMixin):
    """Opaque bearer token issued to an admin user at login."""

    __tablename__ = "session"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    token = Column(String(128), unique=True, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    ip_address = Column(String(128), nullable=True)
    user_agent = Column(String(512), nullable=True)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)

Index("idx_session_user_id", AuthSession.user_id)
