
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from civiltech.core.config import Settings
from civiltech.routers import deps
from civiltech.schemas.common import Ack
from civiltech.schemas.messages import MessageCreate
from civiltech.services import messaging

router = APIRouter(
    prefix="/api",
    tags=["messages"],
)

@router.get("/messages/sent/{user_id}")
def sent_messages(user_id: int, db: Session = Depends(deps.get_db)):
    return messaging.list_sent(db, user_id)

@router.get("/messages/{user_id}")
def inbox(user_id: int, db: Session = Depends(deps.get_db)):
    return messaging.list_inbox(db, user_id)

@router.post("/messages", response_model=Ack)
def send_message(payload: MessageCreate, db: Session = Depends(deps.get_db)):
    message_id = messaging.send_message(db, payload)
    return Ack(message="Sent", id=message_id)

# --- Notifications ---

@router.get("/notifications")
def notifications(
    db: Session = Depends(deps.get_db),
    settings: Settings = Depends(deps.get_settings),
):
    return messaging.list_notifications(db, limit=settings.NOTIFICATION_FEED_LIMIT)

@router.delete("/notifications", response_model=Ack)
def clear_notifications(db: Session = Depends(deps.get_db)):
    messaging.clear_notifications(db)
    return Ack(message="Cleared")
