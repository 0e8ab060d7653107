
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from civiltech.core.config import Settings
from civiltech.routers import deps
from civiltech.schemas.common import Ack
from civiltech.schemas.users import LoginRequest, LoginResult
from civiltech.services import users as user_service
from civiltech.utils.uploads import save_upload

router = APIRouter(
    prefix="/api",
    tags=["auth"],
)

@router.post("/register", response_model=Ack)
def register(
    full_name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    profile_image: Optional[UploadFile] = File(None),
    db: Session = Depends(deps.get_db),
    settings: Settings = Depends(deps.get_settings),
):
    image_name = save_upload(profile_image, settings.UPLOAD_DIR, settings.UPLOAD_FILENAME_PREFIX)
    user_id = user_service.register_user(
        db,
        full_name=full_name,
        email=email,
        password=password,
        role=role,
        status=status,
        profile_image=image_name,
    )
    return Ack(message="User registered", id=user_id)

@router.post("/login", response_model=LoginResult)
def login(payload: LoginRequest, db: Session = Depends(deps.get_db)):
    return user_service.authenticate(db, payload.email, payload.password)
