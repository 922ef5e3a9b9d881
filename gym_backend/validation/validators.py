"""
Validateurs purs des formulaires (réservation, demande d'abonnement, retrait boutique).

Chaque validateur retourne un ValidationResult(is_valid, message) sans effet de bord:
ils sont appelés à chaque frappe pour effacer une erreur dès que la valeur redevient valide.
Le domaine email et le plan de numérotation sont des politiques de déploiement (config).
"""
import re
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from gym_backend.config import (
    ALLOWED_EMAIL_DOMAIN,
    PHONE_COUNTRY_CODE,
    PHONE_SUBSCRIBER_DIGITS,
    PHONE_ALLOWED_PREFIXES,
)


class ValidationResult(NamedTuple):
    is_valid: bool
    message: str = ""


VALID = ValidationResult(True, "")

_EMAIL_SHAPE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_NAME_CHARS = re.compile(r"^[a-zA-Z\s\-']+$")
_PHONE_NOISE = re.compile(r"[\s\-()]")


@dataclass(frozen=True)
class PhonePolicy:
    """Plan de numérotation accepté: indicatif pays + N chiffres, premier chiffre restreint."""

    country_code: str = "+355"
    subscriber_digits: int = 9
    allowed_prefixes: Sequence[str] = ("6", "7", "8")
    country_label: str = "Albanian"


DEFAULT_PHONE_POLICY = PhonePolicy(
    country_code=PHONE_COUNTRY_CODE,
    subscriber_digits=PHONE_SUBSCRIBER_DIGITS,
    allowed_prefixes=tuple(PHONE_ALLOWED_PREFIXES),
)


def _human_list(items: Sequence[str]) -> str:
    items = list(items)
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + f", or {items[-1]}"


def validate_email(email: str, domain: str = ALLOWED_EMAIL_DOMAIN) -> ValidationResult:
    if not (email or "").strip():
        return ValidationResult(False, "Email is required")
    if not _EMAIL_SHAPE.match(email):
        return ValidationResult(False, "Please enter a valid email address")
    # Politique mono-fournisseur: le domaine doit être exactement celui configuré
    if not re.fullmatch(r"[a-zA-Z0-9._%+-]+@" + re.escape(domain), email):
        return ValidationResult(False, f"Please use a {domain} address (example@{domain})")
    return VALID


def clean_phone_input(phone: str) -> str:
    """Retire espaces, tirets et parenthèses (forme canonique avant validation)."""
    return _PHONE_NOISE.sub("", phone or "")


def validate_phone(phone: str, policy: PhonePolicy = DEFAULT_PHONE_POLICY) -> ValidationResult:
    if not (phone or "").strip():
        return ValidationResult(False, "Phone number is required")

    cleaned = clean_phone_input(phone)
    prefix = policy.country_code
    if not cleaned.startswith(prefix):
        return ValidationResult(False, f"Phone number must start with {prefix} ({policy.country_label} country code)")
    if len(cleaned) != len(prefix) + policy.subscriber_digits:
        return ValidationResult(False, f"Phone number must be {prefix} followed by {policy.subscriber_digits} digits")

    digits = cleaned[len(prefix):]
    if not re.fullmatch(r"\d{%d}" % policy.subscriber_digits, digits):
        return ValidationResult(False, f"Phone number must contain only digits after {prefix}")
    if digits[0] not in policy.allowed_prefixes:
        allowed = _human_list(policy.allowed_prefixes)
        return ValidationResult(False, f"{policy.country_label} mobile numbers must start with {allowed} after {prefix}")
    return VALID


def validate_albanian_phone(phone: str) -> ValidationResult:
    return validate_phone(phone, DEFAULT_PHONE_POLICY)


def format_phone(phone: str, policy: PhonePolicy = DEFAULT_PHONE_POLICY) -> str:
    """
    Formate un numéro pour l'affichage: "+355 691 234 567".
    Les valeurs qui n'ont pas la forme attendue sont rendues telles quelles.
    """
    cleaned = clean_phone_input(phone)
    prefix = policy.country_code
    if cleaned.startswith(prefix) and len(cleaned) == len(prefix) + policy.subscriber_digits:
        digits = cleaned[len(prefix):]
        groups = [digits[i:i + 3] for i in range(0, len(digits), 3)]
        return " ".join([prefix] + groups)
    return phone


def validate_name(name: str) -> ValidationResult:
    trimmed = (name or "").strip()
    if not trimmed:
        return ValidationResult(False, "Name is required")
    if len(trimmed) < 2:
        return ValidationResult(False, "Name must be at least 2 characters long")
    if len(trimmed) > 50:
        return ValidationResult(False, "Name must be less than 50 characters")
    if not _NAME_CHARS.match(trimmed):
        return ValidationResult(False, "Name can only contain letters, spaces, hyphens, and apostrophes")
    return VALID
