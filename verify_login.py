
import sys

from civiltech.core.config import settings
from civiltech.core.errors import ClientError
from civiltech.db.session import create_db_engine, build_session_factory
from civiltech.db import base  # noqa: F401  registers every model
from civiltech.services.users import authenticate

def verify_login(email: str = "admin@civiltech.local", password: str = "admin123"):
    engine = create_db_engine(settings)
    db = build_session_factory(engine)()

    try:
        user = authenticate(db, email, password)
        print(f"User '{email}' found. Role: {user['role']}")
        print(f"Password '{password}' works!")
    except ClientError as e:
        print(f"Login failed for '{email}': {e.message}")

    db.close()
    engine.dispose()

if __name__ == "__main__":
    verify_login(*sys.argv[1:3])
