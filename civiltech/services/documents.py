from typing import Optional

from sqlalchemy.orm import Session

from civiltech.core.errors import FeatureUnavailableError
from civiltech.db.features import OptionalFeatures
from civiltech.db.models.document import ProjectDocument


def ensure_documents_enabled(features: OptionalFeatures) -> None:
    if not features.documents:
        raise FeatureUnavailableError("Documents are not enabled on this deployment")


def create_document(
    db: Session,
    features: OptionalFeatures,
    project_id: Optional[int],
    doc_type: Optional[str],
    title: Optional[str],
    file_url: Optional[str],
    uploaded_by: Optional[str],
) -> int:
    ensure_documents_enabled(features)
    document = ProjectDocument(
        project_id=project_id,
        doc_type=doc_type,
        title=title,
        file_url=file_url,
        uploaded_by=uploaded_by,
    )
    db.add(document)
    db.commit()
    return document.id
