from fastapi import APIRouter

from app.api.v1.endpoints import rankings, agents, health

router = APIRouter(prefix="/api/v1")

router.include_router(rankings.router)
router.include_router(agents.router)
router.include_router(health.router)
