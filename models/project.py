from sqlalchemy import Index
from models.base import Base
from models.content import ContentRecordMixin

class Project(Base, ContentRecordMixin):
    __tablename__ = "projects"

Index("idx_projects_status_order", Project.status, Project.order, Project.created_at.desc())
