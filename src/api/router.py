"""Router for the /apis endpoints consumed by the web client."""

from fastapi import APIRouter

from api.routes.activation import router as activation_router
from api.routes.posts import router as posts_router
from api.routes.profiles import router as profiles_router

router = APIRouter()
router.include_router(activation_router)
router.include_router(profiles_router)
router.include_router(posts_router)
