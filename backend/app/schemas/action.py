from enum import Enum
from typing import Generic, Literal, TypeVar, Union
from pydantic import BaseModel

T = TypeVar("T")

class FailureReason(str, Enum):
    unauthorized = "unauthorized"
    validation_failed = "validation_failed"
    not_found = "not_found"
    store_failure = "store_failure"

class ActionSuccess(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: T

class ActionFailure(BaseModel):
    success: Literal[False] = False
    error: str
    reason: FailureReason

ActionResult = Union[ActionSuccess[T], ActionFailure]
