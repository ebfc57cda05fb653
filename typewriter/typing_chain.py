# --------------------------------------------------------------
# File: typing_chain.py
# Description: Secuenciador por párrafos para la revelación del mensaje.
# --------------------------------------------------------------
"""Máquina de estados que decide qué párrafo se está "tecleando".

Estados por mensaje: ``idle`` → ``active(i)`` → ``done``. Transiciones:
``start``, ``advance`` y ``reset``. Es independiente del núcleo criptográfico.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

_PARAGRAPH_BREAK = re.compile(r"\n+")


def split_paragraphs(text: str) -> List[str]:
    """Divide el texto en párrafos por secuencias de saltos de línea."""

    return _PARAGRAPH_BREAK.split(text)


class Phase(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    DONE = "done"


@dataclass(frozen=True)
class ChainState:
    """Estado inmutable de la cadena de un mensaje.

    ``index`` solo tiene sentido en ``Phase.ACTIVE``.
    """

    phase: Phase = Phase.IDLE
    index: int = 0
    total: int = 0

    @property
    def is_active(self) -> bool:
        return self.phase is Phase.ACTIVE

    def is_revealed(self, paragraph_index: int) -> bool:
        """Indica si el párrafo ya terminó de escribirse."""

        if self.phase is Phase.DONE:
            return paragraph_index < self.total
        if self.phase is Phase.ACTIVE:
            return paragraph_index < self.index
        return False


IDLE = ChainState()


class TypingChainRegistry:
    """Mapa ``message_id -> ChainState`` con las transiciones permitidas."""

    def __init__(self) -> None:
        self._chains: Dict[str, ChainState] = {}

    def state(self, message_id: str) -> ChainState:
        return self._chains.get(message_id, IDLE)

    def start(self, message_id: str, paragraph_count: int) -> ChainState:
        """Inicia la cadena en el primer párrafo (o la termina si no hay)."""

        if paragraph_count < 0:
            raise ValueError("paragraph_count no puede ser negativo")
        if paragraph_count == 0:
            new = ChainState(phase=Phase.DONE, total=0)
        else:
            new = ChainState(phase=Phase.ACTIVE, index=0, total=paragraph_count)
        self._chains[message_id] = new
        return new

    def advance(self, message_id: str) -> ChainState:
        """Pasa al siguiente párrafo; tras el último, la cadena queda ``done``."""

        current = self.state(message_id)
        if not current.is_active:
            return current
        if current.index < current.total - 1:
            new = ChainState(phase=Phase.ACTIVE, index=current.index + 1, total=current.total)
        else:
            new = ChainState(phase=Phase.DONE, index=current.index, total=current.total)
        self._chains[message_id] = new
        return new

    def reset(self, message_id: Optional[str] = None) -> None:
        """Vuelve a ``idle`` un mensaje, o todos si no se indica ninguno."""

        if message_id is None:
            self._chains.clear()
        else:
            self._chains.pop(message_id, None)
