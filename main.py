from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging
import os

from config.settings import settings
from core.logger import setup_logging
from database.postgres import SessionLocal, init_db, check_database_health
from utils.response import error_response, field_errors

# Import routers
from api.router.auth import auth_router
from api.router.cooperative import cooperative_router
from api.router.member import member_router, registration_router
from api.router.ledger import ledger_router
from api.router.loan import loan_router
from api.router.reward import reward_router
from api.router.criteria import criteria_router

# Import scripts
from scripts.bootstrap_admin import bootstrap_admin

setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Cooperative Management API",
    description="Members, shares, savings, loans and scoring for cooperatives",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth_router)
app.include_router(registration_router, prefix="/api")
app.include_router(cooperative_router, prefix="/api")
app.include_router(member_router, prefix="/api")
app.include_router(ledger_router, prefix="/api")
app.include_router(loan_router, prefix="/api")
app.include_router(reward_router, prefix="/api")
app.include_router(criteria_router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = field_errors(exc.errors())
    message = next(iter(errors.values()), "Invalid request.")
    return error_response(status_code=400, message=message, errors=errors)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(status_code=exc.status_code, message=str(exc.detail))


@app.on_event("startup")
async def on_startup():
    """
    Startup tasks:
    - Create missing tables
    - Bootstrap the configured administrator
    """
    logger.info("=" * 60)
    logger.info("APPLICATION STARTING UP")
    logger.info("=" * 60)

    db = SessionLocal()
    try:
        init_db()
        logger.info(f"✓ Database ready: {check_database_health()}")

        bootstrap_admin(db)
        logger.info("✓ Admin bootstrap completed")
    except Exception as e:
        logger.error(f"❌ Error during startup: {str(e)}")
        # Don't raise - allow app to start for health checks
    finally:
        db.close()

    logger.info("=" * 60)
    logger.info("APPLICATION READY")
    logger.info("=" * 60)


@app.get("/")
def read_root():
    """Root endpoint"""
    return {
        "name": "Cooperative Management API",
        "version": "1.0.0",
        "status": "operational",
    }


@app.get("/health")
def health_check():
    """
    Health check endpoint for load balancers

    Returns:
        dict: Health status
    """
    health = {
        "status": "healthy",
        "timestamp": time.time(),
    }

    db_health = check_database_health()
    health["database"] = db_health.get("status", "unknown")
    if db_health.get("status") != "healthy":
        health["status"] = "unhealthy"

    status_code = 200 if health["status"] == "healthy" else 503
    return JSONResponse(content=health, status_code=status_code)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """
    Add response time header to all responses
    """
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    return response


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv('PORT', 8001))
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
        workers=1,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )
