import asyncio
import logging
import os

from dotenv import load_dotenv

# Load `.env` before the client modules read their settings (override=True so updates take effect after restart).
load_dotenv(override=True)

from client.context import ClientContext  # noqa: E402
from client.watcher import NotificationWatcher  # noqa: E402

# -------- CONFIG --------
# Run a single check and exit instead of looping; handy with scripts/add_job.py.
WATCH_ONCE = os.getenv("WATCH_ONCE", "false").lower() == "true"
# ------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("watcher")


async def main():
    ctx = ClientContext.from_env()
    watcher = NotificationWatcher(ctx)

    if not watcher.is_enabled():
        log.info(
            "Notifications are off; checks will be no-ops",
            extra={"permission": ctx.notifier.permission},
        )
    elif ctx.push is not None:
        ctx.push.subscribe_in_background()

    try:
        if WATCH_ONCE:
            await watcher.check_once()
        else:
            await watcher.run()
    finally:
        await ctx.aclose()


if __name__ == "__main__":
    asyncio.run(main())
