from typing import Optional

from civiltech.schemas.common import PassThroughModel, NullableInt


class MessageCreate(PassThroughModel):
    sender_id: NullableInt = None
    receiver_id: NullableInt = None
    subject: Optional[str] = None
    message_body: Optional[str] = None
