"""
Database configuration.
Pooled PostgreSQL engine in deployments, a single shared connection for SQLite URIs.
"""

from sqlalchemy import create_engine, event, pool, text
from sqlalchemy.orm import sessionmaker, registry
from config.settings import settings
import logging

logger = logging.getLogger(__name__)

DATABASE_URL = settings.POSTGRES_URI
IS_SQLITE = DATABASE_URL.startswith("sqlite")

if IS_SQLITE:
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=pool.StaticPool,
        echo=False,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        poolclass=pool.QueuePool,
        pool_size=10,  # Number of connections to keep in pool
        max_overflow=20,  # Additional connections allowed beyond pool_size
        pool_timeout=30,  # Seconds to wait for connection from pool
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_pre_ping=True,  # Test connections before using them
        echo=False,
        connect_args={"connect_timeout": 10},
        execution_options={"isolation_level": "READ COMMITTED"},
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,  # Prevent detached instance issues
)

mapper_registry = registry()
Base = mapper_registry.generate_base()


if IS_SQLITE:
    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        """Enforce foreign keys on SQLite connections."""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def configure_mappers():
    """Configure SQLAlchemy mappers dynamically to avoid circular imports."""
    from database import get_db_models

    models = get_db_models()
    mapper_registry.configure()
    logger.info(f"Mappers configured successfully for {len(models)} models.")


def get_db():
    """
    Dependency for getting database sessions with automatic cleanup
    """
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Initialize database with tables"""
    configure_mappers()
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized with tables")


def check_database_health() -> dict:
    """
    Check database health and return status

    Returns:
        dict: Database health status
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "healthy", "driver": engine.dialect.name}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy"}
