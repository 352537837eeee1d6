from fastapi import APIRouter

from app.api.catalogo.router.router_produtos import router as router_produtos

router = APIRouter()

router.include_router(router_produtos)
