"""
Page Runner
Mounts a page configuration document, fires triggers and prints the store.

    python -m widgetlink.runner page.json dropdown-1.onChange 'button-1.onClick={}'
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from widgetlink.core import (
    configure_logging,
    get_logger,
    get_settings,
    parse_json_object,
    safe_json_dumps,
    JSONParseError,
    ValidationError,
)
from widgetlink.page import Page

logger = get_logger(__name__)


def parse_trigger(arg: str) -> Tuple[str, Optional[dict]]:
    """
    Split "<trigger>[=<json context>]".

    Raises:
        ValidationError: If the context is not a JSON object
    """
    trigger, sep, raw = arg.partition("=")
    if not sep:
        return trigger, None
    try:
        return trigger, parse_json_object(raw)
    except JSONParseError as e:
        raise ValidationError(f"Invalid context for {trigger}: {e}") from e


async def run_async(config_path: Path, triggers: Sequence[str]) -> dict:
    """Mount the page, fire each trigger in order, wait for async handlers."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs, stream=sys.stderr)

    page = Page.from_json(config_path.read_text(encoding="utf-8"), settings=settings)
    try:
        for arg in triggers:
            trigger, context = parse_trigger(arg)
            logger.info("firing", trigger=trigger)
            page.fire(trigger, context)
        await page.wait_idle()
        return page.snapshot()
    finally:
        page.close()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="widgetlink", description="Mount a page and fire triggers")
    parser.add_argument("config", type=Path, help="Page configuration document (JSON)")
    parser.add_argument("triggers", nargs="*", help="Triggers to fire, optionally TRIGGER=<json>")
    args = parser.parse_args(argv)

    try:
        snapshot = asyncio.run(run_async(args.config, args.triggers))
    except (OSError, ValidationError) as e:
        logger.error("run_failed", error=str(e))
        return 1

    print(safe_json_dumps(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())
