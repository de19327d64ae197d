# garage_rental/schemas/common.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (both accepted on input)."""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UserMini(CamelModel):
    id: int
    name: str
    email: str | None = None
    phone: str | None = None


class GarageMini(CamelModel):
    id: int
    title: str
    location: str
    images: list[str] = []
