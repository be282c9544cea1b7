"""Task model"""

from sqlalchemy import Column, String, DateTime
from datetime import datetime
from taskflow.core.database import Base
from taskflow.core.ids import new_document_id


class Task(Base):
    __tablename__ = "tasks"
    
    id = Column(String(24), primary_key=True, default=new_document_id)
    
    title = Column(String, nullable=False)
    description = Column(String, default="")
    category = Column(String, default="general", index=True)  # texte libre, pas de FK vers categories
    priority = Column(String, default="medium", index=True)
    status = Column(String, default="pending", index=True)
    due_date = Column(DateTime, nullable=True)
    
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow)
