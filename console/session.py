from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from console.utils.messages import SYMBOL_PROMPT
from core.indodax_public_client import IndodaxPublicClient


@dataclass
class Session:
    client: IndodaxPublicClient
    read_line: Callable[[str], str] = input

    def read_command(self, prompt: str) -> str:
        return self.read_line(prompt).strip()

    def ask_symbol(self) -> str:
        # passed to the URL as typed
        return self.read_line(SYMBOL_PROMPT).strip()
