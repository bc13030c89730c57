from decimal import Decimal
from uuid import UUID
from pydantic import BaseModel

class SetRead(BaseModel):
    id: UUID
    workout_exercise_id: UUID
    set_number: int
    reps: int | None = None
    weight: Decimal | None = None
    completed: bool = False

    model_config = {"from_attributes": True}
