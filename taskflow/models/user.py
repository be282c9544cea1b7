from sqlalchemy import Column, String, DateTime, JSON
from datetime import datetime
from taskflow.core.database import Base
from taskflow.core.ids import new_document_id
import bcrypt

DEFAULT_SETTINGS = {"theme": "light", "notifications": True}


def default_settings():
    return dict(DEFAULT_SETTINGS)


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_document_id)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)  # sensible à la casse
    password_hash = Column(String, nullable=False)
    avatar = Column(String, nullable=True)
    settings = Column(JSON, default=default_settings)
    created_at = Column(DateTime, default=datetime.utcnow)

    def set_password(self, password: str):
        self.password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()
