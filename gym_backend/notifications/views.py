from fastapi import APIRouter, Request

from gym_backend.notifications.toasts import pop_toasts

router = APIRouter(prefix="/api/v1/notifications", tags=["Notifications API"])

@router.get("")
def read_notifications(request: Request):
    """Notifications en attente pour ce visiteur; chaque message n'est servi qu'une fois."""
    return {"toasts": pop_toasts(request.session)}
