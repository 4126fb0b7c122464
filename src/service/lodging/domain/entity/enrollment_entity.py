from datetime import datetime
from typing import List, Optional

import attrs


@attrs.define
class Address:
    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: Optional[str] = None
    enrollment_id: Optional[int] = None
    id: Optional[int] = None


@attrs.define
class Enrollment:
    user_id: int
    name: str
    cpf: str = attrs.field(repr=False)
    birthday: datetime
    phone: str = attrs.field(repr=False)
    addresses: List[Address] = attrs.field(factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
