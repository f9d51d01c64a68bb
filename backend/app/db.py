import os
import logging
from functools import lru_cache
from supabase import create_client, Client

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000  # Supabase row limit per request


@lru_cache(maxsize=1)
def get_client() -> Client:
    url = os.environ["SUPABASE_URL"]
    key = os.environ["SUPABASE_SERVICE_KEY"]
    return create_client(url, key)


def is_duplicate_error(e: Exception) -> bool:
    err_str = str(e).lower()
    return "duplicate" in err_str or "unique" in err_str or "23505" in err_str


def get_profile(db: Client, user_id: str) -> dict | None:
    res = db.table("profiles").select("*").eq("id", user_id).execute()
    return res.data[0] if res.data else None


def insert_profile(db: Client, profile: dict) -> None:
    db.table("profiles").insert(profile).execute()


def insert_exercise_log(db: Client, log: dict) -> None:
    db.table("exercise_logs").insert(log).execute()


def get_exercise_logs(db: Client, user_id: str) -> list[dict]:
    """All exercise logs for a user, oldest first, fetched in pages."""
    logs: list[dict] = []
    offset = 0
    while True:
        res = (
            db.table("exercise_logs")
            .select("user_id, exercise_date")
            .eq("user_id", user_id)
            .order("exercise_date")
            .range(offset, offset + PAGE_SIZE - 1)
            .execute()
        )
        batch = res.data or []
        logs.extend(batch)
        if len(batch) < PAGE_SIZE:
            break
        offset += PAGE_SIZE
    return logs


def count_exercise_logs(db: Client, user_id: str) -> int:
    res = db.table("exercise_logs").select("id", count="exact").eq("user_id", user_id).execute()
    return res.count or 0
