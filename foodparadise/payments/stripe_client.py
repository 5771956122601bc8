"""
Adaptateur Stripe: centralise les appels et la configuration Stripe.
Le processeur est traité comme un service opaque qui renvoie un client_secret.
"""
import logging
from typing import Any, Dict
import stripe

from foodparadise.config import STRIPE_SECRET_KEY
from foodparadise.errors import UpstreamProcessorError

logger = logging.getLogger(__name__)

# module foodparadise.payments.stripe_client
def require_stripe():
    """
    Prépare et retourne le module stripe prêt à l'emploi.
    - Configure stripe.api_key via STRIPE_SECRET_KEY.
    - Sans clé, aucun appel n'est tenté: UpstreamProcessorError.
    """
    if not STRIPE_SECRET_KEY:
        raise UpstreamProcessorError("STRIPE_SECRET_KEY manquant")
    stripe.api_key = STRIPE_SECRET_KEY
    return stripe

def create_payment_intent(*, amount: int, currency: str) -> Dict[str, Any]:
    """
    Crée un PaymentIntent Stripe.
    - amount: entier en unité mineure (centimes)
    - currency: code ISO en minuscules (ex: "usd")
    Retour: {"id": "pi_...", "client_secret": "pi_..._secret_..."}
    Aucune relance: toute erreur Stripe devient UpstreamProcessorError.
    """
    require_stripe()
    try:
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            payment_method_types=["card"],
        )
    except stripe.StripeError as e:
        logger.exception("payments.stripe_client.create_payment_intent failed amount=%s", amount)
        raise UpstreamProcessorError() from e
    client_secret = getattr(intent, "client_secret", None)
    if not client_secret:
        raise UpstreamProcessorError("Réponse Stripe sans client_secret")
    return {"id": getattr(intent, "id", None), "client_secret": client_secret}
