
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiltech.routers import deps
from civiltech.schemas.users import UserOut
from civiltech.services import users as user_service

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
)

@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(deps.get_db)):
    # UserOut has no password field, so the hash never leaves the server
    return [UserOut.model_validate(u, from_attributes=True) for u in user_service.list_users(db)]
