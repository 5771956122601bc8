"""
Agrégations en lecture seule sur le ledger des paiements.
- revenue_summary: compteurs approchés + chiffre d'affaires exact.
- order_breakdown: une ligne par article payé, jointe avec le menu.
- category_rollup: regroupement de order_breakdown par catégorie.
"""
from collections import OrderedDict
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Union

from foodparadise.menu import repository as menu_repository
from foodparadise.payments import repository as payments_repository
from . import repository

Number = Union[int, float]

def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal(0)

def _as_number(value: Decimal) -> Number:
    return int(value) if value == value.to_integral_value() else float(value)

def total_revenue(db) -> Number:
    """Somme exacte des montants de tous les paiements (0 si ledger vide)."""
    total = Decimal(0)
    for row in payments_repository.iter_payments(db, columns="id, amount"):
        total += _to_decimal(row.get("amount"))
    return _as_number(total)

def revenue_summary(db) -> Dict[str, Number]:
    return {
        "userCount": repository.count_table_rows(db, "users"),
        "menuItemCount": repository.count_table_rows(db, "menu"),
        "orderCount": repository.count_table_rows(db, "payments"),
        "totalRevenue": total_revenue(db),
    }

def order_breakdown(db) -> List[Dict[str, Any]]:
    """
    Déplie menu_item_ids (une ligne par id, pas par paiement) et joint le menu.
    Un id absent du menu garde menuItem/category/price à None.
    """
    payments = list(payments_repository.iter_payments(db, columns="id, email, created_at, menu_item_ids"))
    menu_ids = {str(mid) for p in payments for mid in (p.get("menu_item_ids") or [])}
    menu_by_id = menu_repository.get_menu_map(db, menu_ids)

    rows: List[Dict[str, Any]] = []
    for p in payments:
        for mid in p.get("menu_item_ids") or []:
            item = menu_by_id.get(str(mid))
            rows.append({
                "paymentId": p.get("id"),
                "email": p.get("email"),
                "createdAt": p.get("created_at"),
                "menuItemId": str(mid),
                "menuItem": item,
                "category": (item or {}).get("category"),
                "price": (item or {}).get("price"),
            })
    return rows

def category_rollup(rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    groups: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
    for row in rows:
        category = row.get("category")
        if row.get("menuItem") is None or category is None:
            continue
        g = groups.setdefault(category, {"category": category, "quantity": 0, "revenue": Decimal(0)})
        g["quantity"] += 1
        g["revenue"] += _to_decimal(row.get("price"))
    return [
        {**g, "revenue": _as_number(g["revenue"])}
        for _, g in sorted(groups.items())
    ]
