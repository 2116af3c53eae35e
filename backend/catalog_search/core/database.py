"""
Conexión a base de datos PostgreSQL

Este módulo centraliza el acceso a la base de datos con psycopg2:
- Conexiones directas con RealDictCursor (filas como diccionarios)
- Conexiones con reintentos para fallos transitorios (SSL, red)

Author: TM3
"""
import logging
import time

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)

# Seconds psycopg2 waits for the server before giving up
CONNECTION_TIMEOUT = 10


class DatabaseConfigurationError(Exception):
    """Raised when DATABASE_URL is missing"""


def _get_database_url() -> str:
    database_url = settings.DATABASE_URL
    if not database_url:
        raise DatabaseConfigurationError("DATABASE_URL not configured")
    return database_url


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Used by the repositories so rows map directly onto domain models.

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM products")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    return psycopg2.connect(
        _get_database_url(),
        cursor_factory=RealDictCursor,
        connect_timeout=CONNECTION_TIMEOUT
    )


def _backoff_delay(attempt: int, retry_delay: float) -> float:
    """Seconds to wait after a failed attempt (1-based): retry_delay, 2x, 4x..."""
    return retry_delay * (2 ** (attempt - 1))


def get_db_connection_with_retry(max_retries=3, retry_delay=1.0, cursor_factory=None):
    """
    Open a psycopg2 connection, retrying transient connection failures

    Only psycopg2.OperationalError (server down, dropped SSL, timeout) is
    retried; anything else, including a missing DATABASE_URL, fails at once.

    Args:
        max_retries: Total connection attempts, at least 1 (default: 3)
        retry_delay: Wait after the first failure in seconds, doubled each time
        cursor_factory: Optional cursor factory (e.g. RealDictCursor)

    Raises:
        psycopg2.OperationalError: The error of the last attempt
    """
    database_url = _get_database_url()
    connect_kwargs = {"connect_timeout": CONNECTION_TIMEOUT}
    if cursor_factory is not None:
        connect_kwargs["cursor_factory"] = cursor_factory

    attempts = max(1, max_retries)
    for attempt in range(1, attempts + 1):
        try:
            return psycopg2.connect(database_url, **connect_kwargs)
        except psycopg2.OperationalError as e:
            if attempt == attempts:
                logger.error(f"Database unreachable after {attempts} attempt(s): {e}")
                raise

            delay = _backoff_delay(attempt, retry_delay)
            logger.warning(f"Database connection attempt {attempt}/{attempts} failed ({e}), retrying in {delay:.2f}s")
            time.sleep(delay)


def get_db_connection_dict_with_retry(max_retries=3, retry_delay=1.0):
    """Same as get_db_connection_with_retry but rows come back as dicts"""
    return get_db_connection_with_retry(
        max_retries=max_retries,
        retry_delay=retry_delay,
        cursor_factory=RealDictCursor
    )
