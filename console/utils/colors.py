import sys

from core.config import get_settings

_RESET = "\x1b[0m"


def _paint(label: object, *codes: str) -> str:
    text = str(label)
    if not get_settings().use_color or not sys.stdout.isatty():
        return text
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def info(label: object) -> str:
    return _paint(label, "33")


def success(label: object) -> str:
    return _paint(label, "32")


def prompt(label: object) -> str:
    return _paint(label, "36")


def error(label: object) -> str:
    return _paint(label, "31")


def header(label: object) -> str:
    return _paint(label, "34", "4")
