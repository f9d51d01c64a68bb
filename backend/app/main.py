"""
Exercise Streak — FastAPI backend
"""
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from .db import (
    get_client, get_profile, insert_profile, insert_exercise_log,
    get_exercise_logs, count_exercise_logs, is_duplicate_error,
)
from .engine.streak import compute, utc_today
from .models import ProfileCreateRequest, ExerciseLogCreateRequest, UserProfileResponse

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
app = FastAPI(title="Exercise Streak API")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@app.get("/health")
def health():
    try:
        db = get_client()
        db.table("profiles").select("id").limit(1).execute()
        return {"status": "ok", "db": "ok"}
    except Exception as e:
        logger.error("Health check DB failure: %s", e)
        raise HTTPException(status_code=503, detail="DB unavailable")


# ── Profiles ──────────────────────────────────────────────────────────────────

@app.post("/api/profiles", status_code=201)
@limiter.limit("10/minute")
def create_profile(request: Request, body: ProfileCreateRequest):
    db = get_client()
    profile = body.profile.model_dump()
    try:
        insert_profile(db, profile)
    except Exception as e:
        if is_duplicate_error(e):
            raise HTTPException(status_code=409, detail="Profile already exists")
        raise
    logger.info("Profile created: %s (%s)", profile["id"][:8], profile["name"])
    return {"profile": profile}


@app.get("/api/profiles/{user_id}")
def get_user_profile(user_id: str):
    user_id = user_id.lower()
    db = get_client()
    profile = get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")

    logs = get_exercise_logs(db, user_id)
    streak = compute(logs, utc_today())

    user_profile = UserProfileResponse(
        name=profile.get("name", ""),
        total_exercise_day_count=streak.total_day_count,
        current_exercise_day_streak=streak.current_streak,
    )
    return {"user_profile": user_profile.model_dump()}


# ── Exercise logs ─────────────────────────────────────────────────────────────

@app.post("/api/exercise-logs", status_code=201)
@limiter.limit("60/minute")
def create_exercise_log(request: Request, body: ExerciseLogCreateRequest):
    db = get_client()
    if not get_profile(db, body.exercise_log.user_id):
        raise HTTPException(status_code=404, detail="User not found")

    exercise_log = body.exercise_log.model_dump(mode="json")
    insert_exercise_log(db, exercise_log)
    logger.info("Exercise logged for %s...: %s", exercise_log["user_id"][:8], exercise_log["exercise_date"])
    return {"exercise_log": exercise_log}


@app.get("/api/exercise-logs/{user_id}/count")
def get_exercise_log_count(user_id: str):
    user_id = user_id.lower()
    db = get_client()
    if not get_profile(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return {"total_exercise_log_count": count_exercise_logs(db, user_id)}
