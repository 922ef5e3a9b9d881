"""
Coordonnées (nom / email / téléphone) partagées par la réservation, la demande
d'abonnement et la commande retrait en salle.
"""
from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from gym_backend.errors import ValidationError
from .validators import ValidationResult, validate_name, validate_email, validate_phone, clean_phone_input

FIELD_VALIDATORS: Dict[str, Callable[[str], ValidationResult]] = {
    "name": validate_name,
    "email": validate_email,
    "phone": validate_phone,
}


class ContactInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="customerName")
    email: str = Field(default="", alias="customerEmail")
    phone: Optional[str] = Field(default=None, alias="customerPhone")

    def cleaned(self) -> "ContactInfo":
        """Copie normalisée: espaces retirés, téléphone sous forme canonique."""
        return ContactInfo(
            name=self.name.strip(),
            email=self.email.strip(),
            phone=clean_phone_input(self.phone) if self.phone else None,
        )


class FieldErrors:
    """
    Erreurs par champ d'un formulaire.
    Une erreur n'est effacée que lorsque la valeur corrigée redevient valide:
    remplacer une valeur invalide par une autre valeur invalide conserve l'erreur affichée.
    """

    def __init__(self, errors: Optional[Dict[str, str]] = None):
        self._errors: Dict[str, str] = dict(errors or {})

    def validate(self, field: str, value: str) -> bool:
        result = FIELD_VALIDATORS[field](value)
        if result.is_valid:
            self._errors.pop(field, None)
        else:
            self._errors[field] = result.message
        return result.is_valid

    def revalidate(self, field: str, value: str) -> bool:
        """Appelé à chaque frappe: ne touche que le champ modifié et n'ajoute jamais d'erreur."""
        if field == "phone":
            value = clean_phone_input(value)
        result = FIELD_VALIDATORS[field](value)
        if result.is_valid:
            self._errors.pop(field, None)
        return result.is_valid

    def get(self, field: str) -> Optional[str]:
        return self._errors.get(field)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)


def validate_contact(contact: ContactInfo, *, require_phone: bool = True) -> FieldErrors:
    """Valide chaque champ indépendamment et retourne toutes les erreurs trouvées."""
    errors = FieldErrors()
    errors.validate("name", contact.name)
    errors.validate("email", contact.email)
    if require_phone or contact.phone:
        errors.validate("phone", contact.phone or "")
    return errors


def ensure_valid_contact(contact: ContactInfo, *, require_phone: bool = True) -> ContactInfo:
    """Lève ValidationError (avec le détail par champ) si une coordonnée est invalide."""
    errors = validate_contact(contact, require_phone=require_phone)
    if errors:
        raise ValidationError("Please fix the errors below before submitting.", fields=errors.as_dict())
    return contact.cleaned()
