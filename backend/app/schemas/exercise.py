from typing import Annotated
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, StringConstraints

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]

class ExerciseCreate(BaseModel):
    name: NameStr

class ExerciseRead(BaseModel):
    id: UUID
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
