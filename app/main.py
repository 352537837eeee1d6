from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config.settings import ENABLE_DOCS, ENV
from app.core.exception_handlers import (
    domain_exception_handler,
    general_exception_handler,
    validation_exception_handler,
)
from app.core.exceptions import DomainError
from app.core import gateways
from app.utils.logger import logger

from app.api.catalogo.router.router import router as catalogo_router
from app.api.pedidos.router.router import api_pedidos

# ──────────────────────────
# Instância FastAPI
# ──────────────────────────
app = FastAPI(
    title="API de Autoatendimento",
    version="1.0.0",
    description="Catálogo de produtos, pedidos do totem e fila da cozinha",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    redirect_slashes=False  # Evita redirecionamento 307 quando URL não termina com /
)

# ───────────────────────────
# Exception Handlers Globais
# ───────────────────────────
app.add_exception_handler(DomainError, domain_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares
# ───────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ───────────────────────────
# Startup
# ───────────────────────────
@app.on_event("startup")
async def startup():
    logger.info(f"Iniciando API (ENV={ENV})...")
    if gateways.pedido_lock is None:
        gateways.inicializar_gateways()
    logger.info("API iniciada com sucesso.")


@app.on_event("shutdown")
async def shutdown():
    logger.info("API encerrada.")

# ───────────────────────────
# Rotas
# ───────────────────────────

@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}

# ───────────────────────────
# Routers
# ───────────────────────────
app.include_router(catalogo_router)
app.include_router(api_pedidos)
