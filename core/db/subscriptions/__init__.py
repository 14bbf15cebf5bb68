"""
Push subscription storage re-exports.
"""
from core.db.subscriptions.push_store import (
    add_push_subscription,
    get_push_subscriptions,
)

__all__ = [
    "add_push_subscription",
    "get_push_subscriptions",
]
