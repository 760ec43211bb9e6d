"""
Daily vacation countdown post.

Works out whether the institution is on a break today (in the configured
timezone) and posts how many days remain until classes resume, or until the
next break starts.

Usage:
    uv run python scripts/post_countdown.py

Options:
    --date 2024-07-15    Compute for this date instead of today
    --dry-run            Print the message without posting

Meant to be scheduled once a day. A failed post is logged and the run still
finishes normally; there is no retry.
"""
import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

# Ensure project root is on sys.path when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.calendar.clock import today_in
from app.calendar.periods import build_calendar
from app.config import settings
from app.messages.countdown import build_message
from app.publisher.client import XPublisher

log = logging.getLogger("ferias.post_countdown")


async def run(today: date, publisher: XPublisher | None, dry_run: bool = False) -> str:
    """Build today's message and publish it. Returns the message text."""
    calendar = build_calendar()
    text = build_message(today, calendar)
    print(f"Computed message: {text}", flush=True)

    if dry_run or publisher is None:
        print("Dry run, not posting", flush=True)
        return text

    try:
        result = await publisher.post(text)
    except Exception:
        log.exception("Failed to post countdown")
        return text

    print("Post published.", flush=True)
    print(f"  ID: {result.id}", flush=True)
    print(f"  Text: {result.text}", flush=True)
    return text


async def main() -> None:
    parser = argparse.ArgumentParser(description="Post the vacation countdown")
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)")
    parser.add_argument("--dry-run", action="store_true", help="Print the message without posting")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    today = args.date or today_in(settings.timezone)
    print(f"Today ({settings.timezone}): {today.isoformat()}", flush=True)

    publisher = None if args.dry_run else XPublisher()
    await run(today, publisher, dry_run=args.dry_run)


if __name__ == "__main__":
    asyncio.run(main())
