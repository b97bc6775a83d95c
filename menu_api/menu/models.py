from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["appetizer", "entree", "dessert", "beverage"]

CATEGORIES: tuple[str, ...] = ("appetizer", "entree", "dessert", "beverage")


class MenuItemFields(BaseModel):
    """Everything a menu item carries except its id."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    price: float = Field(..., gt=0)
    category: Category
    ingredients: list[str] = Field(..., min_length=1)
    available: bool = True


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    name: str
    description: str
    price: float
    category: Category
    ingredients: list[str]
    available: bool = True

    @classmethod
    def from_fields(cls, item_id: int, fields: MenuItemFields) -> MenuItem:
        return cls(id=item_id, **fields.model_dump())


class DeleteConfirmation(BaseModel):
    message: str = "Successfully deleted"
