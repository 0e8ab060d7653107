
import sys
import os

sys.path.append(os.getcwd())

from civiltech.core.config import settings
from civiltech.db.session import create_db_engine
from civiltech.db.base import create_schema # Imports all models so they are registered

def create_tables(include_optional: bool = True):
    engine = create_db_engine(settings)
    print("Creating all tables...")
    create_schema(engine, include_optional=include_optional)
    print("Tables created.")
    engine.dispose()

if __name__ == "__main__":
    # --core-only skips project_gis / project_documents
    create_tables(include_optional="--core-only" not in sys.argv)
