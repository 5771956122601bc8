"""
Erreurs applicatives typées.
- Chaque erreur porte son code HTTP et un message générique destiné au client.
- La traduction en réponse JSON est faite par app_setup.exceptions (pas dans les vues).
"""


class AppError(Exception):
    status_code = 500
    detail = "Erreur interne"

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class MissingCredential(AppError):
    status_code = 401
    detail = "Non authentifié"


class InvalidCredential(AppError):
    status_code = 401
    detail = "Session expirée, veuillez vous connecter"


class Forbidden(AppError):
    status_code = 403
    detail = "Accès interdit"


class NotFound(AppError):
    status_code = 404
    detail = "Introuvable"


class LedgerWriteError(AppError):
    """Le paiement n'a pas pu être enregistré: il n'est pas considéré comme réglé."""
    status_code = 500
    detail = "Paiement non enregistré"


class UpstreamProcessorError(AppError):
    status_code = 502
    detail = "Erreur du processeur de paiement"


class StorageUnavailable(AppError):
    status_code = 503
    detail = "Stockage indisponible"


# Avertissement (non bloquant) renvoyé avec une réponse de règlement réussie
SETTLEMENT_PARTIAL = "SettlementPartial"
