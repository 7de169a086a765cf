# src/core/config.py
"""
Configurações da Aplicação - Back Office
========================================

Gerencia variáveis de ambiente de forma centralizada e tipada.
"""

import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Carrega .env do diretório raiz
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Configurações centralizadas da aplicação"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════
    # 🌍 AMBIENTE
    # ═══════════════════════════════════════════════════════════

    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ═══════════════════════════════════════════════════════════
    # 🔗 API DO BACK OFFICE (serviço REST externo)
    # ═══════════════════════════════════════════════════════════

    BACKOFFICE_API_URL: str = "http://localhost:8080"
    # Mesmo padrão do httpx
    HTTP_TIMEOUT: float = 5.0

    # Página grande para aproximar "todos os registros" na checagem de duplicidade
    DUPLICATE_CHECK_PAGE_SIZE: int = 1000
    DEFAULT_PAGE_SIZE: int = 10

    # ═══════════════════════════════════════════════════════════
    # 🌐 CORS
    # ═══════════════════════════════════════════════════════════

    ALLOWED_ORIGINS: str = "http://localhost:3000"

    def get_allowed_origins_list(self) -> list[str]:
        """Retorna lista de origens permitidas para CORS"""
        origins = [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]

        if self.is_development:
            origins.extend([
                "http://localhost:3000",
                "http://127.0.0.1:3000",
            ])

        # Remove duplicatas mantendo ordem
        return list(dict.fromkeys(origins))

    # ═══════════════════════════════════════════════════════════
    # 🖥️ SERVIDOR
    # ═══════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════
    # 🔧 PROPRIEDADES ÚTEIS
    # ═══════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT.lower() == "test"


# ✅ Instância global
config = Config()


def validate_config(settings: Config = config):
    """Valida configurações críticas"""
    errors = []

    if not settings.BACKOFFICE_API_URL.startswith(("http://", "https://")):
        errors.append("BACKOFFICE_API_URL deve começar com http:// ou https://")

    if settings.HTTP_TIMEOUT <= 0:
        errors.append("HTTP_TIMEOUT deve ser maior que zero")

    if settings.DUPLICATE_CHECK_PAGE_SIZE < 1 or settings.DEFAULT_PAGE_SIZE < 1:
        errors.append("Tamanhos de página devem ser maiores que zero")

    if settings.ENVIRONMENT not in ["development", "test", "production"]:
        errors.append("ENVIRONMENT deve ser: development, test ou production")

    if errors:
        raise ValueError(
            "❌ Erros de configuração:\n" + "\n".join(f"  • {e}" for e in errors)
        )


validate_config()

if config.is_development:
    logger.info(f"📋 Configuração carregada: ambiente={config.ENVIRONMENT}, api={config.BACKOFFICE_API_URL}")
