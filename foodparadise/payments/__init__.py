"""
Module 'payments' (feature-first): règlement des paiements et PaymentIntents Stripe.
"""
from .pricing import to_minor_units
from .service import settle, create_intent, list_payments

__all__ = [
    "to_minor_units",
    "settle",
    "create_intent",
    "list_payments",
]
