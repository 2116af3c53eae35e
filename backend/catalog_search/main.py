"""
Catalog Search - Backend API
Product search with palindrome discounts
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_search.api import products, search
from catalog_search.core.config import settings
from catalog_search.core.database import CONNECTION_TIMEOUT, get_db_connection_dict_with_retry
from catalog_search.core.seed import run_seed
from catalog_search.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def configure_logging():
    """Apply LOG_LEVEL to the root logger"""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_SEED:
        logger.info("Running auto-seed...")
        try:
            run_seed(ProductRepository())
            logger.info("Auto-seed completed")
        except Exception as e:
            # A failed seed must not prevent the API from starting
            logger.error(f"Auto-seed failed: {e}")
    yield


configure_logging()

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan
)

ALLOWED_ORIGINS = settings.get_allowed_origins()
if ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

app.include_router(search.router, prefix="/api/products", tags=["Search"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Catalog Search API",
        "status": "online",
        "version": settings.API_VERSION,
        "example": "/api/products/search?q=abba"
    }


@app.get("/health")
def health():
    """Health check endpoint para monitoreo - counts the catalog to prove the database answers"""
    start_time = time.time()

    database = {
        "status": "disconnected",
        "products": None,
        "latency_ms": None,
        "error": None,
        "connection_timeout_s": CONNECTION_TIMEOUT
    }

    conn = None
    try:
        conn = get_db_connection_dict_with_retry(max_retries=1)
        database["status"] = "connected"

        cursor = conn.cursor()
        try:
            query_start = time.time()
            cursor.execute("SELECT COUNT(*) AS total FROM products")
            database["products"] = cursor.fetchone()["total"]
            database["latency_ms"] = round((time.time() - query_start) * 1000, 2)
        finally:
            cursor.close()
    except Exception as e:
        database["error"] = str(e)
    finally:
        if conn is not None:
            conn.close()

    return {
        "status": "healthy" if database["error"] is None else "degraded",
        "service": "catalog-search-api",
        "version": settings.API_VERSION,
        "database": database,
        "total_latency_ms": round((time.time() - start_time) * 1000, 2)
    }


def run():
    """Console entry point: serve the API with uvicorn"""
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
