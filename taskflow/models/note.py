"""Note model"""

from sqlalchemy import Column, String, DateTime, Boolean
from datetime import datetime
from taskflow.core.database import Base
from taskflow.core.ids import new_document_id


class Note(Base):
    __tablename__ = "notes"

    id = Column(String(24), primary_key=True, default=new_document_id)
    task_id = Column(String(24), nullable=True, index=True)  # référence indicative, pas de cascade

    title = Column(String, default="")
    content = Column(String, nullable=False)
    color = Column(String, default="#ffffa5")
    pinned = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)
