"""
Lecture du catalogue (tables classes / products) avec la clé anon.
"""
from typing import Any, Dict, List, Optional
import logging

import gym_backend.infra.supabase_client as supabase_client

logger = logging.getLogger(__name__)

def list_products() -> List[Dict[str, Any]]:
    try:
        res = (
            supabase_client.get_supabase()
            .table("products")
            .select("*")
            .eq("active", True)
            .order("id", desc=False)
            .execute()
        )
        return res.data or []
    except Exception:
        logger.exception("catalog.repository.list_products failed")
        return []

def get_product(product_id: int) -> Optional[Dict[str, Any]]:
    try:
        res = (
            supabase_client.get_supabase()
            .table("products")
            .select("*")
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
        rows = res.data or []
        return rows[0] if rows else None
    except Exception:
        logger.exception("catalog.repository.get_product failed id=%s", product_id)
        return None

def list_classes() -> List[Dict[str, Any]]:
    try:
        res = (
            supabase_client.get_supabase()
            .table("classes")
            .select("*")
            .eq("active", True)
            .order("id", desc=False)
            .execute()
        )
        return res.data or []
    except Exception:
        logger.exception("catalog.repository.list_classes failed")
        return []

def get_class(class_id: int) -> Optional[Dict[str, Any]]:
    try:
        res = (
            supabase_client.get_supabase()
            .table("classes")
            .select("*")
            .eq("id", class_id)
            .limit(1)
            .execute()
        )
        rows = res.data or []
        return rows[0] if rows else None
    except Exception:
        logger.exception("catalog.repository.get_class failed id=%s", class_id)
        return None

def class_names() -> Dict[int, str]:
    """id -> nom, toutes classes confondues (actives ou non), pour l'affichage admin."""
    try:
        res = supabase_client.get_supabase().table("classes").select("id, name").order("name").execute()
        return {int(r["id"]): r.get("name") or "" for r in (res.data or []) if r.get("id") is not None}
    except Exception:
        logger.exception("catalog.repository.class_names failed")
        return {}
