"""
Conversion des montants vers l'unité mineure du processeur (centimes).
"""
from decimal import Decimal, InvalidOperation
from typing import Union

# module foodparadise.payments.pricing
def to_minor_units(amount: Union[int, float, str, Decimal]) -> int:
    """
    Montant décimal -> entier en centimes: amount × 100 tronqué vers zéro.
    - Calcul en Decimal sur l'écriture décimale du montant (19.99 -> 1999, pas 1998).
    - Les demi-centimes sont tronqués (12.345 -> 1234).
    - ValueError si le montant n'est pas un nombre fini.
    """
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Montant invalide: {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"Montant invalide: {amount!r}")
    return int(value * 100)
