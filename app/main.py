import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.api.v1.auth import router as auth_router
from app.api.v1.clients import router as clients_router
from app.api.v1.dashboard import activity_router, router as dashboard_router
from app.api.v1.expenses import router as expenses_router
from app.api.v1.inventory_requests import router as requests_router
from app.api.v1.orders import router as orders_router
from app.api.v1.products import router as products_router
from app.core.config import (
    CORS_ORIGINS,
    LOG_LEVEL,
    PROJECT_NAME,
    SESSION_COOKIE,
    SESSION_HTTPS_ONLY,
    SESSION_MAX_AGE,
    SESSION_SECRET,
    VERSION,
)
from app.core.db import init_db, close_db
from app.core.exception_handlers import setup_exception_handlers

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    log.info(f"Starting {PROJECT_NAME} v{VERSION}...")
    await init_db() # Connect to DB and generate schemas
    yield
    await close_db()
    log.info(f"{PROJECT_NAME} stopped.")

app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    lifespan=lifespan,
    # Configure API documentation and paths
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    SessionMiddleware,
    secret_key=SESSION_SECRET,
    session_cookie=SESSION_COOKIE,
    max_age=SESSION_MAX_AGE,
    https_only=SESSION_HTTPS_ONLY,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers for modular API structure
app.include_router(auth_router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(dashboard_router, prefix="/api/v1/dashboard", tags=["Dashboard"])
app.include_router(activity_router, prefix="/api/v1/activities", tags=["Dashboard"])
app.include_router(products_router, prefix="/api/v1/products", tags=["Inventory"])
app.include_router(requests_router, prefix="/api/v1/inventory-requests", tags=["Inventory"])
app.include_router(clients_router, prefix="/api/v1/clients", tags=["Clients"])
app.include_router(orders_router, prefix="/api/v1/orders", tags=["Orders"])
app.include_router(expenses_router, prefix="/api/v1/expenses", tags=["Expenses"])


setup_exception_handlers(app)

@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "app_name": PROJECT_NAME}
