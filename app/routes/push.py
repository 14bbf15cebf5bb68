import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.schemas import PushSubscriptionIn
from core.database import add_push_subscription

router = APIRouter(prefix="/api")
log = logging.getLogger("api")


@router.post("/subscribe", status_code=201)
def subscribe(payload: PushSubscriptionIn):
    """Store a browser push subscription. Clients treat this as fire-and-forget."""
    sub_id = add_push_subscription(
        payload.endpoint,
        p256dh=payload.keys.p256dh,
        auth=payload.keys.auth,
        expiration_time=payload.expirationTime,
    )
    log.info("Push subscription stored", extra={"subscription_id": sub_id})
    return JSONResponse({"status": "subscribed"}, status_code=201)
