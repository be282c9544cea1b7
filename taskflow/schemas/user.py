from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from taskflow.schemas.common import UtcDatetime

class UserSettings(BaseModel):
    theme: str = "light"
    notifications: bool = True

class UserSettingsUpdate(BaseModel):
    theme: Optional[str] = None
    notifications: Optional[bool] = None

class UserCreate(BaseModel):
    # pas de contrôle de format sur l'email, seulement non vide
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    avatar: Optional[str] = None
    settings: UserSettings = Field(default_factory=UserSettings)

class UserUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    avatar: Optional[str] = None
    settings: Optional[UserSettingsUpdate] = None

# Jamais de mot de passe dans les réponses
class UserResponse(BaseModel):
    id: str = Field(serialization_alias="_id")
    username: Optional[str]
    email: Optional[str]
    avatar: Optional[str]
    settings: UserSettings
    created_at: UtcDatetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)
