"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal

from taskflow.schemas.common import InputDatetime, UtcDatetime

TaskPriority = Literal["low", "medium", "high"]
TaskStatus = Literal["pending", "in-progress", "completed"]


class TaskCreate(BaseModel):
    """Schema for creating a task. Required fields and enums are checked here."""

    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = "general"
    priority: TaskPriority = "medium"
    status: TaskStatus = "pending"
    due_date: Optional[InputDatetime] = Field(None, alias="dueDate")

    model_config = ConfigDict(populate_by_name=True)


class TaskUpdate(BaseModel):
    """Schema for updating an existing task.

    Types only: priority/status are not re-checked against their enums,
    whatever is sent is merged as-is onto the stored task.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[InputDatetime] = Field(None, alias="dueDate")

    model_config = ConfigDict(populate_by_name=True)


class TaskResponse(BaseModel):
    """Schema for task responses from API."""

    id: str = Field(serialization_alias="_id")
    title: Optional[str]
    description: Optional[str]
    category: Optional[str]
    priority: Optional[str]
    status: Optional[str]
    due_date: Optional[UtcDatetime] = Field(serialization_alias="dueDate")
    created_at: UtcDatetime = Field(serialization_alias="createdAt")
    updated_at: UtcDatetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)
