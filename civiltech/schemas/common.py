from datetime import date
from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict

from civiltech.utils.nulls import to_null

# Optional reference / date / cost fields: "", "undefined" and "null" become None
NullableInt = Annotated[Optional[int], BeforeValidator(to_null)]
NullableDate = Annotated[Optional[date], BeforeValidator(to_null)]
NullableDecimal = Annotated[Optional[Decimal], BeforeValidator(to_null)]
NullableFloat = Annotated[Optional[float], BeforeValidator(to_null)]


class PassThroughModel(BaseModel):
    # Bodies are stored as sent; numbers in text fields are kept as text
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class Ack(BaseModel):
    status: Literal["ok"] = "ok"
    message: str
    id: Optional[int] = None


class ErrorBody(BaseModel):
    status: Literal["error"] = "error"
    message: str
