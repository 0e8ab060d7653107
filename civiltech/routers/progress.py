
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from civiltech.core.config import Settings
from civiltech.routers import deps
from civiltech.schemas.common import Ack
from civiltech.schemas.projects import ProgressCreate
from civiltech.services import projects as project_service
from civiltech.utils.uploads import save_upload

router = APIRouter(
    prefix="/api/progress",
    tags=["progress"],
)

@router.post("", response_model=Ack)
def create_progress(payload: ProgressCreate, db: Session = Depends(deps.get_db)):
    progress_id = project_service.create_daily_progress(db, payload)
    return Ack(message="Progress recorded", id=progress_id)

@router.post("/{id}/photos", response_model=Ack)
def upload_progress_photo(
    id: int,
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(deps.get_db),
    settings: Settings = Depends(deps.get_settings),
):
    # Nothing is written for an entry that does not exist
    project_service.ensure_progress_exists(db, id)
    filename = save_upload(photo, settings.UPLOAD_DIR, settings.UPLOAD_FILENAME_PREFIX)
    photo_id = project_service.add_progress_photo(db, id, filename)
    return Ack(message="Uploaded", id=photo_id)
