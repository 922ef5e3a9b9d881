"""
Messages transitoires (toasts) à usage unique, stockés dans la session.
Le frontend les récupère via GET /api/v1/notifications (lecture = consommation).
"""
from typing import Any, Dict, List, MutableMapping

TOASTS_SESSION_KEY = "toasts"


def make_toast(title: str, description: str, variant: str = "default") -> Dict[str, str]:
    return {"title": title, "description": description, "variant": variant}


def push_toast(session: MutableMapping[str, Any], title: str, description: str, variant: str = "default") -> None:
    queue = list(session.get(TOASTS_SESSION_KEY) or [])
    queue.append(make_toast(title, description, variant))
    session[TOASTS_SESSION_KEY] = queue


def pop_toasts(session: MutableMapping[str, Any]) -> List[Dict[str, str]]:
    return list(session.pop(TOASTS_SESSION_KEY, None) or [])
