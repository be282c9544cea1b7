"""Category model"""

from sqlalchemy import Column, String
from taskflow.core.database import Base
from taskflow.core.ids import new_document_id


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(24), primary_key=True, default=new_document_id)
    name = Column(String, nullable=False, index=True)
    color = Column(String, default="#3498db")
    icon = Column(String, default="folder")
