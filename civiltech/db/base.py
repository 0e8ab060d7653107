
from sqlalchemy.engine import Engine

from civiltech.db.base_class import Base

# Import models here so create_all sees every table
from civiltech.db.models.project import Project
from civiltech.db.models.company import Company, CompanyPayment
from civiltech.db.models.progress import Category, ProjectScope, DailyProgress, ProgressPhoto
from civiltech.db.models.operations import DailyLabor, EquipmentLog, Fleet, LaborRole
from civiltech.db.models.document import ProjectDocument, ProjectGis
from civiltech.db.models.user import User
from civiltech.db.models.messaging import Message, Notification

# Tables a deployment may not have created yet
OPTIONAL_TABLES = {
    "gis": ProjectGis.__table__,
    "documents": ProjectDocument.__table__,
}


def create_schema(engine: Engine, include_optional: bool = True) -> None:
    optional = set(OPTIONAL_TABLES.values())
    tables = [t for t in Base.metadata.sorted_tables if include_optional or t not in optional]
    Base.metadata.create_all(bind=engine, tables=tables)
