"""
Accès aux données pour la feature 'bookings' (table bookings).
"""
from typing import Any, Dict, List, Optional
import logging

import gym_backend.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

def insert_booking(*, class_id: int, customer_name: str, customer_email: str) -> Optional[Dict[str, Any]]:
    """Retourne la ligne créée (ou {"status": "ok"} si Supabase ne la renvoie pas), None en cas d'erreur."""
    try:
        res = (
            supabase_client.get_supabase()
            .table("bookings")
            .insert({
                "class_id": class_id,
                "customer_name": customer_name,
                "customer_email": customer_email,
            })
            .execute()
        )
        rows = getattr(res, "data", None) or []
        if isinstance(rows, list) and rows:
            return rows[0]
        return {"status": "ok"}
    except Exception:
        logger.exception("bookings.repository.insert_booking failed class_id=%s email=%s", class_id, customer_email)
        return None

def list_bookings(class_id: Optional[int] = None, limit: int = 500) -> List[Dict[str, Any]]:
    """Réservations les plus récentes d'abord (lecture service-role pour l'admin)."""
    try:
        query = supabase_client.get_service_supabase().table("bookings").select("*")
        if class_id is not None:
            query = query.eq("class_id", class_id)
        res = query.order("created_at", desc=True).limit(limit).execute()
        return res.data or []
    except Exception:
        logger.exception("bookings.repository.list_bookings failed class_id=%s", class_id)
        return []

def count_bookings() -> Optional[int]:
    try:
        res = supabase_client.get_service_supabase().table("bookings").select("id", count="exact").execute()
        if getattr(res, "count", None) is not None:
            return int(res.count)
        return len(res.data or [])
    except Exception:
        logger.exception("bookings.repository.count_bookings failed")
        return None
