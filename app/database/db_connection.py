# app/database/db_connection.py

import logging
from typing import Callable, TypeVar

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.exceptions import DatabaseError

# Base única para todos os models
Base = declarative_base()

logger = logging.getLogger(__name__)

T = TypeVar("T")


def criar_engine(db_url: str) -> Engine:
    """
    Cria o engine do banco.

    URLs SQLite (usadas nos testes) compartilham uma única conexão entre
    threads, já que os gateways executam o ORM fora do event loop.
    """
    if db_url.startswith("sqlite"):
        engine = create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(db_url, pool_pre_ping=True)
    logger.info("Engine criado para %s", engine.url.render_as_string(hide_password=True))
    return engine


def criar_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def executar_transacao(session_factory: sessionmaker, operacao: Callable[[Session], T]) -> T:
    """
    Executa ``operacao`` em uma sessão própria: commit no sucesso, rollback em
    qualquer erro. Falhas do SQLAlchemy viram DatabaseError.
    """
    db = session_factory()
    try:
        resultado = operacao(db)
        db.commit()
        return resultado
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Erro no banco de dados: {e}")
        raise DatabaseError(str(e))
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
