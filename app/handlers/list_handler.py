from fastapi import FastAPI
from mangum import Mangum
from app.errors import register_error_handlers
from app.routers.list_router import router as list_router

app = FastAPI(title="List Lambda")
register_error_handlers(app)
app.include_router(list_router, prefix="/lists")

handler = Mangum(app, lifespan="off")
