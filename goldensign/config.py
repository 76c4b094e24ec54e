# -*- coding: utf-8 -*-
"""
Configuração lida do ambiente (ou de um arquivo .env).
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _database_url():
    url = os.environ.get("DATABASE_URL", "sqlite:///./database/goldensign.db")
    # Provedores como o Render entregam o prefixo antigo do PostgreSQL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


class Settings:
    DATABASE_URL = _database_url()
    ORIGIN = os.environ.get("GOLDENSIGN_ORIGIN", "http://localhost:8000")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")  # None = stderr


settings = Settings()


def configure_logging(level=None, filename=None):
    """Configura o logging da aplicação (chamar uma vez, no ponto de entrada)."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=filename or settings.LOG_FILE,
    )
