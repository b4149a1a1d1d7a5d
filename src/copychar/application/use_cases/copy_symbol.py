"""Use Case: Copy Symbol to Clipboard.

Resolves a symbol to its character and hands it to the delivery engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from copychar.application.use_cases.deliver_content import DeliverContentUseCase
from copychar.domain.models.outcome import DeliveryOutcome
from copychar.domain.models.symbols import Character, Symbol, character


@dataclass(frozen=True)
class CopyResult:
    character: Character
    outcome: DeliveryOutcome


class CopySymbolUseCase:
    """Resolve a symbol and copy its character to the clipboard."""

    def __init__(self, engine: DeliverContentUseCase) -> None:
        self._engine = engine

    def execute(self, symbol: Symbol) -> CopyResult:
        """Resolve and deliver *symbol*.

        Returns:
            The rendered character and the delivery outcome.
        """
        ch = character(symbol)
        return CopyResult(character=ch, outcome=self._engine.execute(ch.text))
