from fastapi import FastAPI
from mangum import Mangum
from app.errors import register_error_handlers
from app.routers.todo_router import router as todo_router

app = FastAPI(title="Todo Lambda")
register_error_handlers(app)
app.include_router(todo_router, prefix="/todos")

handler = Mangum(app, lifespan="off")
