"""
Erreurs métier du backend.

Chaque erreur porte un titre court et une description d'une ligne, comme les
notifications (toasts) affichées au visiteur. Les services lèvent ces erreurs;
app_setup.exceptions les convertit en réponses JSON.
"""
from typing import Dict, Optional


class GymError(Exception):
    """Base des erreurs présentées à l'utilisateur."""

    status_code = 400
    title = "Error"

    def __init__(self, message: str, *, title: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if title:
            self.title = title

    def to_toast(self) -> Dict[str, object]:
        return {"title": self.title, "detail": self.message, "variant": "destructive"}


class ValidationError(GymError):
    """Saisie invalide: toujours récupérable, affichée à côté du champ et/ou en toast."""

    status_code = 400
    title = "Validation Error"

    def __init__(self, message: str, *, fields: Optional[Dict[str, str]] = None, title: Optional[str] = None):
        super().__init__(message, title=title)
        self.fields = dict(fields or {})

    def to_toast(self) -> Dict[str, object]:
        toast = super().to_toast()
        if self.fields:
            toast["fields"] = self.fields
        return toast


class RemoteWriteError(GymError):
    """L'écriture dans la base (Supabase) a échoué: opération abandonnée."""

    status_code = 502
    title = "Save Error"


class CheckoutError(GymError):
    """Création de session de paiement impossible ou sans URL: panier conservé."""

    status_code = 502
    title = "Checkout Error"


class NotificationDeliveryError(GymError):
    """Envoi d'email échoué. Journalisé uniquement, jamais présenté au visiteur."""

    status_code = 502
    title = "Notification Error"


class NotFoundError(GymError):
    """Cours ou produit inconnu (ou inactif)."""

    status_code = 404
    title = "Not Found"
