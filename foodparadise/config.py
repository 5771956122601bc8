# foodparadise.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale du service.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs (Supabase, JWT, Stripe)
- Expose CORS/hosts et quelques réglages (durée des tokens, pagination analytics)
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _int_env(name: str, default: int) -> int:
    raw = _clean_env(os.getenv(name) or "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default

# Supabase: URL et clés
# - SUPABASE_URL peut parfois être sans schéma: on préfixe en https:// si nécessaire
# - Le serveur travaille avec la clé service (fallback sur la clé publique)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or "")
SUPABASE_KEY = _clean_env(os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or "")
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# Tokens d'accès (JWT signés avec un secret partagé)
# Access_Token_Secret: nom historique de la variable côté front
ACCESS_TOKEN_SECRET = _clean_env(os.getenv("ACCESS_TOKEN_SECRET") or os.getenv("Access_Token_Secret") or "")
ACCESS_TOKEN_TTL_SECONDS = _int_env("ACCESS_TOKEN_TTL_SECONDS", 60 * 60)
JWT_ALGORITHM = _clean_env(os.getenv("JWT_ALGORITHM") or "HS256")

# Stripe: clé secrète et devise des PaymentIntents
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or os.getenv("PAYMENT_SECRET_KEY") or "")
PAYMENT_CURRENCY = _clean_env(os.getenv("PAYMENT_CURRENCY") or "usd").lower()

# CORS: le front Vite tourne sur 5173 en dev
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

# En-têtes HSTS uniquement derrière HTTPS
HTTPS_ONLY = (os.getenv("HTTPS_ONLY", "false").lower() == "true")

# Taille de page pour les lectures complètes du ledger (PostgREST limite à 1000 lignes par défaut)
ANALYTICS_PAGE_SIZE = _int_env("ANALYTICS_PAGE_SIZE", 1000)
