"""Response schemas for the book catalogue."""

from pydantic import BaseModel, ConfigDict


class BookItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
