from sqlalchemy import Index
from models.base import Base
from models.content import ContentRecordMixin

class AiSector(Base, ContentRecordMixin):
    __tablename__ = "ai_sectors"

Index("idx_ai_sectors_status_order", AiSector.status, AiSector.order, AiSector.created_at.desc())
