
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from civiltech.core.config import Settings
from civiltech.db.features import OptionalFeatures
from civiltech.routers import deps
from civiltech.schemas.common import Ack, NullableInt
from civiltech.services import documents as document_service
from civiltech.utils.uploads import save_upload

router = APIRouter(
    prefix="/api/documents",
    tags=["documents"],
)

@router.post("", response_model=Ack)
def upload_document(
    project_id: Annotated[NullableInt, Form()] = None,
    doc_type: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    uploaded_by: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(deps.get_db),
    settings: Settings = Depends(deps.get_settings),
    features: OptionalFeatures = Depends(deps.get_features),
):
    # Refuse before anything lands on disk
    document_service.ensure_documents_enabled(features)
    file_url = save_upload(file, settings.UPLOAD_DIR, settings.UPLOAD_FILENAME_PREFIX)
    document_id = document_service.create_document(
        db,
        features,
        project_id=project_id,
        doc_type=doc_type,
        title=title,
        file_url=file_url,
        uploaded_by=uploaded_by,
    )
    return Ack(message="Uploaded", id=document_id)
