"""
Storefront - Backend API
CRUD para clientes, categorías, carritos y pedidos
"""
import time
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import settings
from storefront.core.database import check_database_connection, create_tables
from storefront.api import customer_details, product_categories, product_orders, shopping_carts

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_TABLES:
        logger.info("Creating database tables if missing")
        create_tables()
    yield


# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Include API routers
app.include_router(product_categories.router, prefix="/api/product-categories", tags=["Product Categories"])
app.include_router(customer_details.router, prefix="/api/customer-details", tags=["Customer Details"])
app.include_router(shopping_carts.router, prefix="/api/shopping-carts", tags=["Shopping Carts"])
app.include_router(product_orders.router, prefix="/api/product-orders", tags=["Product Orders"])


@app.get("/")
async def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION
    }


@app.get("/health")
def health():
    """Health check endpoint para monitoreo - tests database connectivity"""
    start_time = time.time()

    db_latency_ms = None
    db_error = None

    try:
        db_latency_ms = check_database_connection(
            max_retries=settings.HEALTH_CHECK_RETRIES,
            retry_delay=settings.HEALTH_CHECK_RETRY_DELAY,
        )
        db_status = "connected"
    except Exception as e:
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": settings.APP_NAME,
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error
        },
        "total_latency_ms": total_latency_ms
    }
