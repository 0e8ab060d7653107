
import sys

from civiltech.core.config import settings
from civiltech.db.session import create_db_engine, build_session_factory
from civiltech.db.base import create_schema
from civiltech.db.models.user import User
from civiltech.core.security import get_password_hash

def create_admin(email: str = "admin@civiltech.local", password: str = "admin123"):
    engine = create_db_engine(settings)
    create_schema(engine, include_optional=settings.CREATE_OPTIONAL_TABLES)
    db = build_session_factory(engine)()

    admin = db.query(User).filter(User.email == email).first()
    if not admin:
        print("Creating admin user...")
        admin = User(
            full_name="Admin User",
            email=email,
            password=get_password_hash(password),
            role="Admin",
            status="Active",
        )
        db.add(admin)
        db.commit()
        print("Admin user created.")
    else:
        print("Admin user already exists.")

    db.close()
    engine.dispose()

if __name__ == "__main__":
    create_admin(*sys.argv[1:3])
