from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.api.routes_labels import router as labels_router
from app.api.routes_todos import router as todos_router

GREETING = "Hello! my-todo!!"

api_router = APIRouter()


@api_router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root():
    return GREETING


api_router.include_router(todos_router, prefix="/todos")
api_router.include_router(labels_router, prefix="/labels")
