# src/main.py
"""
Aplicação Principal - Back Office
=================================
Camada de formulários do back office: valida cadastros (clientes,
fornecedores, funcionários e produtos), normaliza os dados e repassa para a
API REST do back office.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from src.api.routes import router as api_router
from src.api.services.backoffice_client import BackofficeAPIError
from src.core.config import config
from src.core.middleware.correlation import CorrelationIdMiddleware

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia ciclo de vida da aplicação"""

    logger.info("=" * 60)
    logger.info("🚀 INICIANDO BACK OFFICE")
    logger.info("=" * 60)
    logger.info(f"🌍 Ambiente: {config.ENVIRONMENT}")
    logger.info(f"🔗 API do back office: {config.BACKOFFICE_API_URL}")
    logger.info(f"🌐 CORS: {len(config.get_allowed_origins_list())} origens")
    logger.info("✅ APLICAÇÃO PRONTA!")
    logger.info("=" * 60)

    yield

    logger.info("=" * 60)
    logger.info("🛑 DESLIGANDO APLICAÇÃO")
    logger.info("=" * 60)


# ✅ CRIA APLICAÇÃO
fast_app = FastAPI(
    title="Back Office API",
    version="1.0.0",
    docs_url="/docs" if config.DEBUG else None,
    redoc_url="/redoc" if config.DEBUG else None,
    lifespan=lifespan
)

fast_app.add_middleware(CorrelationIdMiddleware)
fast_app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-correlation-id"],
)

fast_app.include_router(api_router)


# ═══════════════════════════════════════════════════════════
# ROTAS BÁSICAS
# ═══════════════════════════════════════════════════════════

@fast_app.get("/")
async def root():
    """Endpoint raiz"""
    return {
        "name": "Back Office API",
        "version": "1.0.0",
        "status": "operational",
        "environment": config.ENVIRONMENT
    }


@fast_app.get("/health")
async def health_check():
    """Health check para monitoramento"""
    return {
        "status": "healthy",
        "services": {
            "backoffice_api": config.BACKOFFICE_API_URL,
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# ═══════════════════════════════════════════════════════════
# TRATAMENTO DE ERROS GLOBAL
# ═══════════════════════════════════════════════════════════

@fast_app.exception_handler(BackofficeAPIError)
async def backoffice_error_handler(request: Request, exc: BackofficeAPIError):
    """Erros da API do back office que escaparam das rotas"""
    logger.error(f"❌ Erro da API do back office: {exc.status_code} {exc.message}")
    return JSONResponse(
        status_code=502,
        content={
            "error": "Bad Gateway",
            "message": exc.message or "Erro ao comunicar com a API do back office",
            "correlation_id": getattr(request.state, "correlation_id", "unknown")
        }
    )


@fast_app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handler para erros de validação"""
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "message": str(exc)
        }
    )


app = fast_app
