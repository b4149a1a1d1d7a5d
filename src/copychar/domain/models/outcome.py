"""Delivery outcome and the captured result of the primary clipboard probe."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from copychar.domain.errors import ClipboardError


class DeliveryOutcome(str, Enum):
    """Result of one delivery attempt."""

    DELIVERED = "delivered"  # primary set confirmed by read-back
    DELIVERED_UNCONFIRMED = "delivered_unconfirmed"  # fallback set, not re-probed
    FAILED = "failed"

    @property
    def succeeded(self) -> bool:
        return self is not DeliveryOutcome.FAILED


@dataclass(frozen=True)
class PrimaryProbe:
    """Results of the primary backend's set and get calls, captured independently.

    The three predicates below are order-insensitive and are computed only
    from these captured results, so no signal is lost to short-circuiting.
    """

    set_error: Optional[ClipboardError] = None
    get_value: Optional[str] = None
    get_error: Optional[ClipboardError] = None

    @property
    def set_ok(self) -> bool:
        return self.set_error is None

    @property
    def get_ok(self) -> bool:
        return self.get_error is None

    @property
    def unresponsive(self) -> bool:
        """Neither set nor get worked."""
        return not self.set_ok and not self.get_ok

    def local_get_mismatch(self, remote: bool) -> bool:
        """A local session must be able to read back what it set."""
        return not remote and not self.get_ok

    @property
    def empty_after_set(self) -> bool:
        """Get succeeded but the clipboard is empty: the set silently no-op'd."""
        return self.get_ok and not self.get_value

    def inconclusive(self, remote: bool) -> bool:
        return self.unresponsive or self.local_get_mismatch(remote) or self.empty_after_set
