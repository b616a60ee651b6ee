from fastapi import APIRouter

from app.api.routes import incidents, view

api_router = APIRouter()

api_router.include_router(view.router, tags=["view"])
api_router.include_router(incidents.router, tags=["incidents"])
