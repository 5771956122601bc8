from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from foodparadise.utils.validators import id_as_text, rename_keys

# colonnes de stockage -> clés JSON du front
WIRE_KEYS = {"menu_item_id": "menuId", "created_at": "createdAt"}


class CartItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    menu_item_id: str = Field(alias="menuId", min_length=1)
    name: Optional[str] = None
    image: Optional[str] = None
    price: float = Field(ge=0)
    quantity: int = Field(default=1, ge=1)

    @field_validator("menu_item_id", mode="before")
    @classmethod
    def _menu_id_as_text(cls, v: Any) -> Any:
        return id_as_text(v)

    def to_row(self) -> dict:
        return self.model_dump(exclude_none=True)


def to_wire(row: Dict[str, Any]) -> Dict[str, Any]:
    return rename_keys(row, WIRE_KEYS)
