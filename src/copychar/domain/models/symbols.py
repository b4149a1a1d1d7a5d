"""Symbol table: the closed set of characters ``cb`` can copy.

Every :class:`Symbol` maps to exactly one Unicode scalar value. The table is
fixed at import time and checked by :class:`Character` when a symbol is
rendered, so an invalid entry fails fast instead of reaching the clipboard.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from copychar.domain.errors import SymbolTableError

_MAX_CODEPOINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


class Category(str, Enum):
    """Grouping used when listing the available symbols."""

    DASHES = "Dashes"
    OPERATORS = "Operators"
    EQUALITY = "Equality"
    SET_THEORY = "Set theory"
    LONG_ARROWS = "Long arrows"
    OTHER = "Other"


class Symbol(str, Enum):
    """Symbolic names accepted on the command line."""

    EN_DASH = "en-dash"
    EM_DASH = "em-dash"

    MINUS = "minus"
    TIMES = "times"
    DIV = "div"

    SIM = "sim"
    APPROX = "approx"
    GTE = "gte"
    LTE = "lte"

    IN = "in"
    NI = "ni"
    UNION = "union"
    INTERSECTION = "intersection"
    SUBSET = "subset"
    SUBSETEQ = "subseteq"
    SUPSET = "supset"
    SUPSETEQ = "supseteq"

    RIGHT_ARROW = "right-arrow"
    MAPS_TO = "maps-to"
    LEFT_ARROW = "left-arrow"
    MAPS_FROM = "maps-from"

    PRIME = "prime"
    PLUS_MINUS = "plus-minus"
    DEGREE = "degree"
    TRADE_MARK = "trade-mark"


# Symbol → (codepoint, category)
SYMBOL_TABLE: dict[Symbol, tuple[int, Category]] = {
    Symbol.EN_DASH: (0x2013, Category.DASHES),
    Symbol.EM_DASH: (0x2014, Category.DASHES),
    Symbol.MINUS: (0x2212, Category.OPERATORS),
    Symbol.TIMES: (0x00D7, Category.OPERATORS),
    Symbol.DIV: (0x00F7, Category.OPERATORS),
    Symbol.SIM: (0x223C, Category.EQUALITY),
    Symbol.APPROX: (0x2248, Category.EQUALITY),
    Symbol.GTE: (0x2265, Category.EQUALITY),
    Symbol.LTE: (0x2264, Category.EQUALITY),
    Symbol.IN: (0x2208, Category.SET_THEORY),
    Symbol.NI: (0x220B, Category.SET_THEORY),
    Symbol.UNION: (0x222A, Category.SET_THEORY),
    Symbol.INTERSECTION: (0x2229, Category.SET_THEORY),
    Symbol.SUBSET: (0x2282, Category.SET_THEORY),
    Symbol.SUBSETEQ: (0x2286, Category.SET_THEORY),
    Symbol.SUPSET: (0x2283, Category.SET_THEORY),
    Symbol.SUPSETEQ: (0x2287, Category.SET_THEORY),
    Symbol.RIGHT_ARROW: (0x27F6, Category.LONG_ARROWS),
    Symbol.MAPS_TO: (0x27FC, Category.LONG_ARROWS),
    Symbol.LEFT_ARROW: (0x27F5, Category.LONG_ARROWS),
    Symbol.MAPS_FROM: (0x27FB, Category.LONG_ARROWS),
    Symbol.PRIME: (0x2032, Category.OTHER),
    Symbol.PLUS_MINUS: (0x00B1, Category.OTHER),
    Symbol.DEGREE: (0x00B0, Category.OTHER),
    Symbol.TRADE_MARK: (0x2122, Category.OTHER),
}


class Character(BaseModel):
    """A rendered symbol: its name, codepoint and category."""

    model_config = ConfigDict(frozen=True)

    symbol: Symbol
    codepoint: int
    category: Category

    @field_validator("codepoint")
    @classmethod
    def _must_be_scalar_value(cls, v: int) -> int:
        if not 0 <= v <= _MAX_CODEPOINT or v in _SURROGATES:
            raise SymbolTableError(f"U+{v:04X} is not a Unicode scalar value")
        return v

    @property
    def text(self) -> str:
        return chr(self.codepoint)

    @property
    def label(self) -> str:
        """Codepoint in ``U+XXXX`` notation."""
        return f"U+{self.codepoint:04X}"

    def __str__(self) -> str:
        return self.text


def character(symbol: Symbol) -> Character:
    """Return the :class:`Character` for *symbol*."""
    codepoint, category = SYMBOL_TABLE[symbol]
    return Character(symbol=symbol, codepoint=codepoint, category=category)


def resolve(symbol: Symbol) -> str:
    """Return the single-character string for *symbol*."""
    return character(symbol).text


def by_category() -> dict[Category, list[Character]]:
    """Group every symbol by category, preserving declaration order."""
    groups: dict[Category, list[Character]] = {cat: [] for cat in Category}
    for symbol in Symbol:
        ch = character(symbol)
        groups[ch.category].append(ch)
    return groups
