from typing import Optional

from civiltech.schemas.common import PassThroughModel, NullableInt, NullableDate, NullableDecimal


class CompanyCreate(PassThroughModel):
    company_name: Optional[str] = None
    type: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    status: Optional[str] = None


class PaymentCreate(PassThroughModel):
    company_id: NullableInt = None
    amount: NullableDecimal = None
    payment_type: Optional[str] = None
    description: Optional[str] = None
    payment_date: NullableDate = None


class PaymentUpdate(PassThroughModel):
    amount: NullableDecimal = None
    payment_type: Optional[str] = None
    description: Optional[str] = None
    payment_date: NullableDate = None
