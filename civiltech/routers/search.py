
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from civiltech.routers import deps
from civiltech.schemas.dashboard import SearchHit
from civiltech.services import search as search_service

router = APIRouter(
    prefix="/api/search",
    tags=["search"],
)

@router.get("", response_model=List[SearchHit])
def global_search(q: Optional[str] = Query(None), db: Session = Depends(deps.get_db)):
    return search_service.search(db, q)
