# api/routes/router.py
from fastapi import APIRouter

from . import auth, dashboard, exercises, meals, meta, pages, profile, recommend

# JSON API, mounted under /api
api_router = APIRouter()

api_router.include_router(meals.router, prefix="/meals", tags=["Meals"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["Exercises"])
api_router.include_router(recommend.router, prefix="/exercise", tags=["Recommendations"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(meta.router, tags=["meta"])

# browser-facing: sign-in/out and page view models
site_router = APIRouter()

site_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
site_router.include_router(pages.router)
