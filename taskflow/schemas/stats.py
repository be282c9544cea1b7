from pydantic import BaseModel, ConfigDict, Field

class TaskCounts(BaseModel):
    total: int
    pending: int
    in_progress: int = Field(alias="inProgress")
    completed: int

    model_config = ConfigDict(populate_by_name=True)

class PriorityCounts(BaseModel):
    high: int
    medium: int
    low: int

class StatsResponse(BaseModel):
    tasks: TaskCounts
    priority: PriorityCounts
    categories: int
    notes: int
