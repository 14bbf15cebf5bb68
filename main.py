"""
Entry point to run the new-job notification watcher.
"""
import asyncio

from client.main import main as watcher_main


if __name__ == "__main__":
    asyncio.run(watcher_main())
