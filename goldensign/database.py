# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy que guarda os slots chave/valor.
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from goldensign.config import settings

# Cria uma Base class
Base = declarative_base()


def make_engine(database_url):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        # sqlite:///./database/x.db -> garante que ./database existe
        path = database_url.split("///", 1)[-1]
        if path and path != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)

    # pool_pre_ping=True: verifica se a conexão está viva antes de usar
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def make_session_factory(database_url):
    return sessionmaker(autocommit=False, autoflush=False, bind=make_engine(database_url))


def get_session_factory():
    """Fábrica de sessões para o DATABASE_URL configurado."""
    return make_session_factory(settings.DATABASE_URL)
