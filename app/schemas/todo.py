from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class TodoBase(BaseModel):
    text: str = Field(min_length=1)
    checked: bool = False

class TodoCreate(TodoBase):
    id: Optional[int] = Field(default=None, gt=0)
    list_id: int

class TodoCreateInList(TodoBase):
    """Body for POST /lists/{list_id}/todos; the list comes from the path."""
    id: Optional[int] = Field(default=None, gt=0)

class TodoUpdate(BaseModel):
    text: Optional[str] = Field(default=None, min_length=1)
    checked: Optional[bool] = None
    list_id: Optional[int] = None

# rows written outside the API may hold empty text, so no input constraints here
class TodoOut(BaseModel):
    id: int
    text: str
    checked: bool
    list_id: int
    model_config = ConfigDict(from_attributes=True)
