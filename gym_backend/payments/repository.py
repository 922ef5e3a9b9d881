"""
Accès aux données pour la feature 'payments' (tables orders / order_items).
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional
import logging

import gym_backend.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

# module gym_backend.payments.repository
def insert_order(*, customer_email: str, total_amount: Decimal, status: str,
                 stripe_session_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Insère une commande (service-role) et retourne la ligne créée, None en cas d'erreur.
    status: 'pending' (checkout Stripe) ou 'pickup' (retrait en salle).
    """
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("orders")
            .insert({
                "customer_email": customer_email,
                "total_amount": float(total_amount),
                "stripe_session_id": stripe_session_id,
                "status": status,
            })
            .execute()
        )
        rows = res.data or []
        return rows[0] if isinstance(rows, list) and rows else None
    except Exception:
        logger.exception("payments.repository.insert_order failed email=%s session=%s", customer_email, stripe_session_id)
        return None

def insert_order_items(order_id: str, items: List[Dict[str, Any]]) -> bool:
    """items: [{"product_id", "quantity", "price"}, ...]"""
    rows = [
        {
            "order_id": order_id,
            "product_id": it["product_id"],
            "quantity": int(it["quantity"]),
            "price": float(it["price"]),
        }
        for it in items
    ]
    if not rows:
        return True
    try:
        supabase_client.get_service_supabase().table("order_items").insert(rows).execute()
        return True
    except Exception:
        logger.exception("payments.repository.insert_order_items failed order_id=%s", order_id)
        return False

def find_order_id_by_session(stripe_session_id: str) -> Optional[str]:
    try:
        res = (
            supabase_client.get_service_supabase()
            .table("orders")
            .select("id")
            .eq("stripe_session_id", stripe_session_id)
            .limit(1)
            .execute()
        )
        rows = res.data or []
        return str(rows[0]["id"]) if rows else None
    except Exception:
        logger.exception("payments.repository.find_order_id_by_session failed session=%s", stripe_session_id)
        return None

def complete_order(order_id: str) -> bool:
    """Appelle la fonction SQL complete_order(order_id_param) (passe la commande à 'completed')."""
    try:
        supabase_client.get_service_supabase().rpc("complete_order", {"order_id_param": order_id}).execute()
        return True
    except Exception:
        logger.exception("payments.repository.complete_order failed order_id=%s", order_id)
        return False

def delete_order(order_id: str) -> bool:
    """Supprime une commande sans lignes (annulation d'une écriture partielle)."""
    try:
        supabase_client.get_service_supabase().table("orders").delete().eq("id", order_id).execute()
        return True
    except Exception:
        logger.exception("payments.repository.delete_order failed order_id=%s", order_id)
        return False
