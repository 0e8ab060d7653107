
import structlog
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from civiltech.core.config import Settings

logger = structlog.get_logger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    if settings.is_sqlite:
        return create_engine(
            settings.SQLALCHEMY_DATABASE_URI,
            connect_args={"check_same_thread": False},
        )
    # Fixed ceiling, no overflow; callers past the ceiling queue for a free connection
    return create_engine(
        settings.SQLALCHEMY_DATABASE_URI,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("database_unavailable", error=str(e))
        return False
    logger.info("database_connected", url=engine.url.render_as_string(hide_password=True))
    return True
