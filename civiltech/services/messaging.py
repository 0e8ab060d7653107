from typing import List

import structlog
from sqlalchemy import desc
from sqlalchemy.orm import Session, aliased

from civiltech.db.models.messaging import Message, Notification
from civiltech.db.models.user import User
from civiltech.schemas.messages import MessageCreate
from civiltech.utils.rows import row_to_dict

logger = structlog.get_logger(__name__)


def list_inbox(db: Session, user_id: int) -> List[dict]:
    sender = aliased(User)
    rows = (
        db.query(Message, sender.full_name)
        .join(sender, Message.sender_id == sender.id)
        .filter(Message.receiver_id == user_id)
        .order_by(desc(Message.created_at), desc(Message.id))
        .all()
    )
    return [row_to_dict(m, sender_name=name) for m, name in rows]


def list_sent(db: Session, user_id: int) -> List[dict]:
    receiver = aliased(User)
    rows = (
        db.query(Message, receiver.full_name)
        .join(receiver, Message.receiver_id == receiver.id)
        .filter(Message.sender_id == user_id)
        .order_by(desc(Message.created_at), desc(Message.id))
        .all()
    )
    return [row_to_dict(m, receiver_name=name) for m, name in rows]


def send_message(db: Session, payload: MessageCreate) -> int:
    """
    Stores the message, then posts a global notification about it.

    The two inserts are committed separately; a failed notification leaves the message in place.
    """
    message = Message(
        sender_id=payload.sender_id,
        receiver_id=payload.receiver_id,
        subject=payload.subject,
        message_body=payload.message_body,
    )
    db.add(message)
    db.commit()

    db.add(Notification(message=f"New Message: {payload.subject}", type="Info"))
    db.commit()
    logger.info("message_sent", message_id=message.id, receiver_id=payload.receiver_id)
    return message.id


def list_notifications(db: Session, limit: int = 10) -> List[dict]:
    rows = (
        db.query(Notification)
        .order_by(desc(Notification.created_at), desc(Notification.id))
        .limit(limit)
        .all()
    )
    return [row_to_dict(n) for n in rows]


def clear_notifications(db: Session) -> int:
    deleted = db.query(Notification).delete()
    db.commit()
    return deleted
