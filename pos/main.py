from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import uvicorn

from pos.config import get_settings
from pos.database import engine, Base
from pos.models import category, customer, product, purchase, setting, transaction, user  # noqa: F401
from pos.services.errors import PersistenceError
from pos.api import categories, customers, health, inventory, purchases, settings as settings_api, transactions, users

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up POS server...")

    # Create database tables
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")

    yield

    # Shutdown
    logger.info("Shutting down POS server...")


# Create FastAPI application
app = FastAPI(
    title="Point of Sale API",
    description="""
    Backend for the point-of-sale desktop client:

    - **Inventory**: Products, categories and manual stock counts
    - **Purchases**: Supplier deliveries that add to stock
    - **Transactions**: Sales and held orders; paid sales come off stock
    - **Customers, Users, Settings**: Store administration

    ## Stock reconciliation
    A purchase is stored first, then each line item updates its product's
    stock one after the other. Line items that can't be applied come back
    as `warnings`; the purchase is never rolled back.

    Fully paid transactions are taken off stock by a Celery task.
    """,
    version="1.0.0",
    lifespan=lifespan
)

# The desktop renderer calls the API from a file:// origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies keep pydantic's details next to the error message."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    """Store failures not handled by a router. Details stay in the log."""
    logger.error(f"Unhandled persistence error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error"},
    )


# Include API routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(inventory.router, prefix="/api/v1")
app.include_router(purchases.router, prefix="/api/v1")
app.include_router(categories.router, prefix="/api/v1")
app.include_router(customers.router, prefix="/api/v1")
app.include_router(settings_api.router, prefix="/api/v1")
app.include_router(transactions.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": "Point of Sale API",
        "version": "1.0.0",
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/api/v1/health"
    }


def run():
    """Start the API server (used by the desktop shell)."""
    uvicorn.run("pos.main:app", host=settings.HOST, port=settings.PORT)
