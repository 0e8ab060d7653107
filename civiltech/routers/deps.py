
from fastapi import Request
from sqlalchemy.orm import Session

from civiltech.core.config import Settings
from civiltech.db.features import OptionalFeatures

def get_db(request: Request):
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_features(request: Request) -> OptionalFeatures:
    return request.app.state.features
