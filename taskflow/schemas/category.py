from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# Schemas catégories

class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    color: str = "#3498db"
    icon: str = "folder"

class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None

class CategoryResponse(BaseModel):
    id: str = Field(serialization_alias="_id")
    name: Optional[str]
    color: Optional[str]
    icon: Optional[str]

    model_config = ConfigDict(from_attributes=True)
