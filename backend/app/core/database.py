"""
Conexión a base de datos PostgreSQL

Este módulo centraliza TODAS las formas de acceso a la base de datos:
- SQLAlchemy (definición de tablas y creación al arrancar)
- psycopg2 directo (para queries SQL raw en los repositorios)

Connections are opened per call and never retried here; a failure surfaces
to the caller immediately.

Author: TM3
Updated: 2026-10-17
"""
import logging

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration (table definitions)
# ============================================================================

# SQLAlchemy Engine (lazy: no connection is made until first use)
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verificar conexión antes de usar
)

# Base para modelos
Base = declarative_base()


def init_db() -> None:
    """
    Create missing tables (CREATE TABLE IF NOT EXISTS semantics)

    Called once at application startup when AUTO_CREATE_TABLES is enabled.
    """
    # Import models so they register on Base.metadata
    from app.models import order  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables verified")


# ============================================================================
# psycopg2 Direct Connections (for raw SQL queries)
# ============================================================================

def get_db_connection():
    """
    Get a direct psycopg2 database connection (returns tuples)

    Returns:
        psycopg2 connection object

    Raises:
        RuntimeError if DATABASE_URL is not configured
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    return psycopg2.connect(database_url)


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM orders")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    return psycopg2.connect(database_url, cursor_factory=RealDictCursor)
