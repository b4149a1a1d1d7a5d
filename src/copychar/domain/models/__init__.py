"""Domain models: public API."""

from copychar.domain.models.outcome import DeliveryOutcome, PrimaryProbe
from copychar.domain.models.symbols import (
    SYMBOL_TABLE,
    Category,
    Character,
    Symbol,
    by_category,
    character,
    resolve,
)

__all__ = [
    # Symbols
    "SYMBOL_TABLE",
    "Category",
    "Character",
    "Symbol",
    "by_category",
    "character",
    "resolve",
    # Delivery
    "DeliveryOutcome",
    "PrimaryProbe",
]
