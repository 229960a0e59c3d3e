from __future__ import annotations

import sys
import time

from console.session import Session
from console.utils.colors import header, info, success
from console.utils.messages import (
    BANNER_TEMPLATE,
    CLEAR_SCREEN,
    CLEARING_TEXT,
    HELP_ENTRIES,
    HELP_TITLE,
)
from core.config import get_settings


def show_banner() -> None:
    print(BANNER_TEMPLATE.format(marker=info("i"), api=success("Official IndoDax API")))


def cmd_help(session: Session) -> None:
    print(header(HELP_TITLE))
    for marker, command, description in HELP_ENTRIES:
        print(f"[{header(marker)}] {command} | {description}")


def cmd_clear(session: Session) -> None:
    print(f"[{success('+')}] {CLEARING_TEXT}")
    time.sleep(get_settings().clear_delay_seconds)
    sys.stdout.write(CLEAR_SCREEN)
    sys.stdout.flush()
