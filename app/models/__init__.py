from app.models.todo_list import TodoList
from app.models.todo import Todo

__all__ = ["TodoList", "Todo"]
