from __future__ import annotations

import logging
from typing import Callable

from console.handlers import market, start
from console.session import Session
from console.utils.colors import error, prompt
from console.utils.messages import PROMPT_TEMPLATE, UNKNOWN_COMMAND_TEXT
from core.config import get_settings
from core.indodax_public_client import public_client

logger = logging.getLogger(__name__)

COMMANDS: dict[str, Callable[[Session], None]] = {
    "help": start.cmd_help,
    "clear": start.cmd_clear,
    "servertime": market.cmd_servertime,
    "pairs": market.cmd_pairs,
    "ticker": market.cmd_ticker,
    "trades": market.cmd_trades,
    "depth": market.cmd_depth,
}


def run(session: Session) -> None:
    """Read-eval-print loop. Returns when input is exhausted."""
    start.show_banner()
    while True:
        try:
            command = session.read_command(PROMPT_TEMPLATE.format(keyword=prompt("help")))
            handler = COMMANDS.get(command)
            if handler is None:
                print(f"[{error('!')}] {UNKNOWN_COMMAND_TEXT}")
                continue
            handler(session)
        except EOFError:
            print()
            return


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("Console started", extra={"base_url": str(settings.indodax_base_url)})
    try:
        run(Session(client=public_client))
    except KeyboardInterrupt:
        print()
    finally:
        public_client.close()
        logger.info("Console stopped")


if __name__ == "__main__":
    main()
