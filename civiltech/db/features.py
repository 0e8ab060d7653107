
from dataclasses import dataclass

import structlog
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from civiltech.db.base import OPTIONAL_TABLES

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OptionalFeatures:
    """Which optional tables exist in the connected schema."""

    gis: bool = False
    documents: bool = False

    def as_dict(self) -> dict:
        return {"gis": self.gis, "documents": self.documents}


def probe_optional_features(engine: Engine) -> OptionalFeatures:
    try:
        inspector = inspect(engine)
        found = {name: inspector.has_table(table.name) for name, table in OPTIONAL_TABLES.items()}
    except SQLAlchemyError as e:
        logger.warning("optional_table_probe_failed", error=str(e))
        return OptionalFeatures()
    features = OptionalFeatures(**found)
    logger.info("optional_tables", **features.as_dict())
    return features
