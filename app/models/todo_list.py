from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from app.database import Base

class TodoList(Base):
    __tablename__ = "lists"
    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(Text, nullable=False)

    todos = relationship("Todo", back_populates="todo_list", order_by="Todo.id")

    def __repr__(self) -> str:
        return f"<TodoList id={self.id} name={self.name!r}>"
