"""FastAPI API endpoints under /api.

Endpoint groups: health, characters (/asterix/characters/...),
villages (/asterix/villages/...). Mutations are
POST .../add, PUT .../update/{id}, DELETE .../remove with an {"id": ...} body.
"""

from fastapi import APIRouter

from .characters import router as characters_router
from .settings import router as settings_router
from .villages import router as villages_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(characters_router)
router.include_router(villages_router)
