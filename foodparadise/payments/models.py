from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from foodparadise.config import PAYMENT_CURRENCY
from foodparadise.errors import SETTLEMENT_PARTIAL
from foodparadise.utils.validators import id_as_text, rename_keys

# colonnes du ledger -> clés JSON du front
WIRE_KEYS = {
    "transaction_id": "transactionId",
    "cart_ids": "cartIds",
    "menu_item_ids": "menuItemIds",
    "created_at": "createdAt",
}


def to_wire(row: Dict[str, Any]) -> Dict[str, Any]:
    return rename_keys(row, WIRE_KEYS)


class PaymentIntentIn(BaseModel):
    price: float = Field(gt=0)


class PaymentIn(BaseModel):
    """Paiement confirmé côté client, à enregistrer dans le ledger."""
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    amount: float = Field(gt=0, validation_alias=AliasChoices("amount", "price"))
    currency: str = PAYMENT_CURRENCY
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    status: Optional[str] = None
    cart_ids: List[str] = Field(alias="cartIds", min_length=1)
    menu_item_ids: List[str] = Field(default_factory=list, alias="menuItemIds")

    @field_validator("cart_ids", "menu_item_ids", mode="before")
    @classmethod
    def _ids_as_text(cls, v: Any) -> Any:
        # Les ids int8 (identity Supabase) arrivent en nombres JSON
        if isinstance(v, list):
            return [id_as_text(i) for i in v]
        return v

    @field_validator("cart_ids")
    @classmethod
    def _unique_cart_ids(cls, v: List[str]) -> List[str]:
        # Ensemble d'ids, ordre d'arrivée conservé
        seen: Dict[str, None] = {}
        for cid in v:
            cid = str(cid).strip()
            if cid:
                seen.setdefault(cid, None)
        if not seen:
            raise ValueError("cartIds ne doit pas être vide")
        return list(seen)

    @field_validator("currency")
    @classmethod
    def _lower_currency(cls, v: str) -> str:
        return (v or PAYMENT_CURRENCY).strip().lower()

    def to_row(self, created_at: str) -> Dict[str, Any]:
        row = self.model_dump(exclude_none=True)
        row["created_at"] = created_at
        return row


@dataclass
class SettlementResult:
    payment: Dict[str, Any]
    requested: int
    deleted_count: int
    cleanup_error: Optional[str] = None

    @property
    def partial(self) -> bool:
        return self.deleted_count < self.requested

    def to_response(self) -> Dict[str, Any]:
        return {
            "paymentResult": {"acknowledged": True, "insertedId": self.payment.get("id")},
            "deleteResult": {
                "acknowledged": self.cleanup_error is None,
                "deletedCount": self.deleted_count,
                "requestedCount": self.requested,
            },
            "warning": SETTLEMENT_PARTIAL if self.partial else None,
            "error": self.cleanup_error,
        }
