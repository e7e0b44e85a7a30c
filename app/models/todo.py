from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text, false
from sqlalchemy.orm import relationship
from app.database import Base

class Todo(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, nullable=False)
    text = Column(Text, nullable=False)
    checked = Column(Boolean, nullable=False, default=False, server_default=false())
    list_id = Column(Integer, ForeignKey("lists.id"), nullable=False)

    todo_list = relationship("TodoList", back_populates="todos")

    def __repr__(self) -> str:
        return f"<Todo id={self.id} list_id={self.list_id} checked={self.checked}>"
