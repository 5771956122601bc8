"""
Cas d'usage 'payments': orchestre repository, panier et Stripe.

Règlement (settle):
  1) ajout du paiement au ledger; en cas d'échec on s'arrête (rien n'est réglé);
  2) suppression des articles de panier listés dans cartIds (instantané au checkout);
  3) retour du résultat d'insertion et du nombre de lignes supprimées.
Le ledger fait foi: un échec de l'étape 2 est signalé mais n'annule pas l'étape 1.
Les deux étapes ne sont pas atomiques; un règlement rejoué crée un second paiement.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List
import logging

from foodparadise.carts import repository as carts_repository
from foodparadise.config import PAYMENT_CURRENCY
from foodparadise.errors import LedgerWriteError
from . import repository
from . import stripe_client
from .models import PaymentIn, SettlementResult, to_wire
from .pricing import to_minor_units

logger = logging.getLogger(__name__)

CLEANUP_FAILED = "Nettoyage du panier échoué"

def settle(db, payment: PaymentIn) -> SettlementResult:
    record = payment.to_row(created_at=datetime.now(timezone.utc).isoformat())
    try:
        inserted = repository.insert_payment(db, record)
    except Exception as e:
        raise LedgerWriteError() from e
    inserted = inserted or record

    requested = len(payment.cart_ids)
    try:
        deleted = carts_repository.delete_items(db, payment.cart_ids)
    except Exception:
        logger.error("payments.settle cleanup failed payment_id=%s requested=%s", inserted.get("id"), requested)
        return SettlementResult(inserted, requested, 0, cleanup_error=CLEANUP_FAILED)

    result = SettlementResult(inserted, requested, deleted)
    if result.partial:
        logger.warning(
            "payments.settle partial payment_id=%s deleted=%s requested=%s",
            inserted.get("id"), deleted, requested,
        )
    else:
        logger.info("payments.settle ok payment_id=%s items=%s", inserted.get("id"), deleted)
    return result

def create_intent(price: float) -> Dict[str, Any]:
    """Demande un PaymentIntent au processeur et renvoie {"clientSecret": ...}."""
    amount = to_minor_units(price)
    if amount <= 0:
        raise ValueError("Montant trop faible")
    intent = stripe_client.create_payment_intent(amount=amount, currency=PAYMENT_CURRENCY)
    return {"clientSecret": intent["client_secret"]}

def list_payments(db, email: str) -> List[dict]:
    """Historique d'un utilisateur, plus récent d'abord, avec les clés JSON du front."""
    return [to_wire(row) for row in repository.list_by_email(db, email)]
