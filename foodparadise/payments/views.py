import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from foodparadise.infra.supabase_client import get_db
from foodparadise.utils.rate_limit import optional_rate_limit
from foodparadise.utils.security import verify_token_dependency
from . import service as payments_service
from .models import PaymentIn, PaymentIntentIn

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Payments API"])

# module foodparadise.payments.views
@router.post("/create-payment-intent", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_payment_intent(body: PaymentIntentIn, claims: Dict[str, Any] = Depends(verify_token_dependency)):
    """
    Crée un PaymentIntent Stripe pour le montant du panier.
    - Entrée JSON: {"price": <montant décimal>}
    - Sortie: {"clientSecret": "..."} à utiliser côté client pour confirmer le paiement.
    - Erreurs: 400 montant invalide, 502 si Stripe échoue (pas de relance).
    """
    try:
        return payments_service.create_intent(body.price)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/payments/{email}")
def list_payments(email: str, db=Depends(get_db)):
    return payments_service.list_payments(db, email)

@router.post("/payments")
def settle_payment(payment: PaymentIn, db=Depends(get_db)):
    """
    Enregistre le paiement puis retire les articles de panier réglés.
    - deleteResult.deletedCount < requestedCount: panier déjà partiellement retiré
      (warning "SettlementPartial"), le paiement reste enregistré.
    """
    result = payments_service.settle(db, payment)
    return result.to_response()
