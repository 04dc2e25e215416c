from fastapi import APIRouter
from elearn.api.routes import universities, users, teachers, categories, courses, messages

api_router = APIRouter()

api_router.include_router(universities.router, prefix="/universities", tags=["universities"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(teachers.router, prefix="/teachers", tags=["teachers"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
