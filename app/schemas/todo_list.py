from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class TodoListBase(BaseModel):
    name: str = Field(min_length=1)

class TodoListCreate(TodoListBase):
    id: Optional[int] = Field(default=None, gt=0)

class TodoListUpdate(TodoListBase):
    pass

class TodoListOut(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)
