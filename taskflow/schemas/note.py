from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from taskflow.schemas.common import DocumentRef, UtcDatetime

# Schemas pour les notes

class NoteCreate(BaseModel):
    task_id: DocumentRef = Field(None, alias="taskId")
    title: str = ""
    content: str = Field(..., min_length=1)
    color: str = "#ffffa5"
    pinned: bool = False

    model_config = ConfigDict(populate_by_name=True)

class NoteUpdate(BaseModel):
    task_id: DocumentRef = Field(None, alias="taskId")
    title: Optional[str] = None
    content: Optional[str] = None
    color: Optional[str] = None
    pinned: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True)

class NoteResponse(BaseModel):
    id: str = Field(serialization_alias="_id")
    task_id: Optional[str] = Field(serialization_alias="taskId")
    title: Optional[str]
    content: Optional[str]
    color: Optional[str]
    pinned: Optional[bool]
    created_at: UtcDatetime = Field(serialization_alias="createdAt")
    updated_at: UtcDatetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)
