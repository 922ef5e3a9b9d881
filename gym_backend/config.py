# gym_backend.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

"""
Configuration centrale du backend de la salle de sport.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les secrets/URLs (Supabase, Stripe, Resend)
- Expose les politiques de validation (domaine email, indicatif téléphone)
- Fournit les URLs de retour du checkout (?payment=success / ?payment=cancelled)
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _csv_env(name: str, default: str) -> list[str]:
    return [p.strip() for p in os.getenv(name, default).split(",") if p.strip()]

# Supabase: URL et clés (anon/service)
SUPABASE_URL = _clean_env(os.getenv("SUPABASE_URL") or os.getenv("VITE_SUPABASE_URL") or "")
SUPABASE_ANON = _clean_env(os.getenv("SUPABASE_ANON_KEY") or os.getenv("SUPABASE_KEY") or "")
SUPABASE_SERVICE_KEY = _clean_env(os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_SERVICE_ROLE_KEY") or "")

if SUPABASE_URL and not SUPABASE_URL.startswith("http"):
    SUPABASE_URL = "https://" + SUPABASE_URL
if SUPABASE_URL.endswith("/"):
    SUPABASE_URL = SUPABASE_URL.rstrip("/")

# CORS / hôtes
# Origines du frontend autorisées à envoyer le cookie de session (jamais "*" avec credentials)
CORS_ORIGINS = _csv_env("CORS_ORIGINS", "http://localhost:8082,http://127.0.0.1:8082")
ALLOWED_HOSTS = _csv_env("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")
SESSION_SECRET_KEY = _clean_env(os.getenv("SESSION_SECRET_KEY") or "replace_me_with_a_long_random_secret")

# Stripe: clé privée et secret webhook
STRIPE_SECRET_KEY = _clean_env(os.getenv("STRIPE_SECRET_KEY") or "")
STRIPE_WEBHOOK_SECRET = _clean_env(os.getenv("STRIPE_WEBHOOK_SECRET") or "")
CHECKOUT_CURRENCY = _clean_env(os.getenv("CHECKOUT_CURRENCY") or "usd").lower()

# Fonction de checkout externe (optionnelle). Vide => session Stripe créée en interne.
CHECKOUT_FUNCTION_URL = _clean_env(os.getenv("CHECKOUT_FUNCTION_URL") or "")

# Pages de succès/annulation du checkout (marqueurs de retour)
CHECKOUT_SUCCESS_PATH = os.getenv("CHECKOUT_SUCCESS_PATH", "/?payment=success")
CHECKOUT_CANCEL_PATH = os.getenv("CHECKOUT_CANCEL_PATH", "/?payment=cancelled")

BASE_URL = _clean_env(os.getenv("BASE_URL") or "http://localhost:8000").rstrip("/")

# Resend: envoi des emails de notification
RESEND_API_KEY = _clean_env(os.getenv("RESEND_API_KEY") or "")
RESEND_API_URL = _clean_env(os.getenv("RESEND_API_URL") or "https://api.resend.com/emails")
NOTIFY_FROM = os.getenv("NOTIFY_FROM", "Angels Fitness <onboarding@resend.dev>")
NOTIFY_TO = _csv_env("NOTIFY_TO", "owner@gmail.com")

# Politiques de validation (propres au déploiement)
ALLOWED_EMAIL_DOMAIN = _clean_env(os.getenv("ALLOWED_EMAIL_DOMAIN") or "gmail.com").lower()
PHONE_COUNTRY_CODE = _clean_env(os.getenv("PHONE_COUNTRY_CODE") or "+355")
PHONE_SUBSCRIBER_DIGITS = int(os.getenv("PHONE_SUBSCRIBER_DIGITS", "9"))
PHONE_ALLOWED_PREFIXES = _csv_env("PHONE_ALLOWED_PREFIXES", "6,7,8")

# Réservations: délai avant retour à l'état "idle" (secondes)
BOOKING_RESET_SECONDS = float(os.getenv("BOOKING_RESET_SECONDS", "3"))
