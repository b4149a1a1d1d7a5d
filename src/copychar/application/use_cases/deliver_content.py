"""Use Case: Deliver Content to the Clipboard.

Two tiers, one attempt each:

1. Set through the primary backend, then read it back. Both calls are made
   unconditionally and their results captured before any decision.
2. If the probe is inconclusive (see :class:`PrimaryProbe`), set through a
   freshly constructed fallback backend. Construction and set share one
   failure boundary; any error raised there becomes ``FAILED``.

The fallback is trusted without a read-back, since reading was already
shown unreliable in this environment.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from copychar.domain.errors import ClipboardError
from copychar.domain.models.outcome import DeliveryOutcome, PrimaryProbe
from copychar.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)


class DeliverContentUseCase:
    """Place a string on the clipboard, falling back when the result is ambiguous."""

    def __init__(
        self,
        primary: ClipboardPort,
        fallback_factory: Callable[[], ClipboardPort],
        environ: Mapping[str, str],
        remote_session_var: str = "SSH_CLIENT",
    ) -> None:
        self._primary = primary
        self._fallback_factory = fallback_factory
        self._environ = environ
        self._remote_session_var = remote_session_var

    @property
    def remote(self) -> bool:
        return self._remote_session_var in self._environ

    def probe(self, content: str) -> PrimaryProbe:
        """Set *content* through the primary backend and read it back."""
        set_error = get_error = None
        get_value = None

        try:
            self._primary.copy(content)
        except ClipboardError as exc:
            set_error = exc

        try:
            get_value = self._primary.paste()
        except ClipboardError as exc:
            get_error = exc

        return PrimaryProbe(set_error=set_error, get_value=get_value, get_error=get_error)

    def execute(self, content: str) -> DeliveryOutcome:
        """Deliver *content* and report how far the delivery got.

        Never raises :class:`ClipboardError`, and never raises from the fallback tier.
        """
        probe = self.probe(content)
        remote = self.remote
        logger.debug(
            "Primary probe: set_ok=%s get_ok=%s remote=%s unresponsive=%s "
            "local_get_mismatch=%s empty_after_set=%s",
            probe.set_ok,
            probe.get_ok,
            remote,
            probe.unresponsive,
            probe.local_get_mismatch(remote),
            probe.empty_after_set,
        )

        if not probe.inconclusive(remote):
            return DeliveryOutcome.DELIVERED

        logger.info("Primary clipboard result inconclusive, trying fallback backend")
        try:
            fallback = self._fallback_factory()
            fallback.copy(content)
        except ClipboardError as exc:
            logger.warning("Clipboard could not be populated: %s", exc)
            return DeliveryOutcome.FAILED
        except Exception:
            # Fallback backends are contained whatever they raise
            logger.exception("Clipboard could not be populated: fallback backend crashed")
            return DeliveryOutcome.FAILED

        return DeliveryOutcome.DELIVERED_UNCONFIRMED
