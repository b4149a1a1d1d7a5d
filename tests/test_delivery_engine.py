"""Tests for the two-tier clipboard delivery engine."""

from __future__ import annotations

import logging

import pyperclip
import pytest

from copychar.application.use_cases.copy_symbol import CopySymbolUseCase
from copychar.application.use_cases.deliver_content import DeliverContentUseCase
from copychar.domain.errors import BackendUnavailableError, ClipboardError
from copychar.domain.models.outcome import DeliveryOutcome, PrimaryProbe
from copychar.domain.models.symbols import Symbol
from copychar.domain.ports.clipboard_port import ClipboardPort
from copychar.infrastructure.clipboard.anywhere_clipboard import AnywhereClipboard
from copychar.infrastructure.clipboard.session import SessionContext

REMOTE = {"SSH_CLIENT": "10.0.0.1 51234 22"}
LOCAL: dict[str, str] = {}


# ---------------------------------------------------------------------------
# Stubs
# ---------------------------------------------------------------------------


class StubClipboard(ClipboardPort):
    """In-memory clipboard with scriptable failures."""

    def __init__(
        self,
        set_fails: bool = False,
        get_fails: bool = False,
        stores: bool = True,
    ) -> None:
        self.set_fails = set_fails
        self.get_fails = get_fails
        self.stores = stores
        self.contents = ""
        self.copy_calls = 0
        self.paste_calls = 0

    def copy(self, text: str) -> None:
        self.copy_calls += 1
        if self.set_fails:
            raise ClipboardError("set failed")
        if self.stores:
            self.contents = text

    def paste(self) -> str:
        self.paste_calls += 1
        if self.get_fails:
            raise ClipboardError("get failed")
        return self.contents


class FallbackFactory:
    """Counts constructions and hands out a StubClipboard (or fails)."""

    def __init__(self, clipboard: StubClipboard | None = None, error: Exception | None = None):
        self.clipboard = clipboard or StubClipboard()
        self.error = error
        self.calls = 0

    def __call__(self) -> ClipboardPort:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.clipboard


def _engine(primary, fallback, environ=LOCAL, var="SSH_CLIENT") -> DeliverContentUseCase:
    return DeliverContentUseCase(
        primary=primary,
        fallback_factory=fallback,
        environ=environ,
        remote_session_var=var,
    )


# ---------------------------------------------------------------------------
# PrimaryProbe predicates
# ---------------------------------------------------------------------------


class TestPrimaryProbe:
    def test_clean_probe(self):
        probe = PrimaryProbe(get_value="−")
        assert not probe.unresponsive
        assert not probe.local_get_mismatch(remote=False)
        assert not probe.empty_after_set
        assert not probe.inconclusive(remote=False)

    def test_unresponsive_needs_both_failures(self):
        err = ClipboardError("x")
        assert PrimaryProbe(set_error=err, get_error=err).unresponsive
        assert not PrimaryProbe(set_error=err, get_value="a").unresponsive
        assert not PrimaryProbe(get_error=err).unresponsive

    def test_local_get_mismatch_depends_on_session(self):
        probe = PrimaryProbe(get_error=ClipboardError("x"))
        assert probe.local_get_mismatch(remote=False)
        assert not probe.local_get_mismatch(remote=True)

    def test_empty_after_set(self):
        assert PrimaryProbe(get_value="").empty_after_set
        assert not PrimaryProbe(get_error=ClipboardError("x")).empty_after_set

    def test_set_failure_alone_with_good_readback_is_conclusive(self):
        probe = PrimaryProbe(set_error=ClipboardError("x"), get_value="old")
        assert not probe.inconclusive(remote=False)


class TestDeliveryOutcome:
    def test_succeeded(self):
        assert DeliveryOutcome.DELIVERED.succeeded
        assert DeliveryOutcome.DELIVERED_UNCONFIRMED.succeeded
        assert not DeliveryOutcome.FAILED.succeeded


# ---------------------------------------------------------------------------
# Engine branching
# ---------------------------------------------------------------------------


class TestPrimaryTier:
    def test_confirmed_readback_is_delivered(self):
        primary = StubClipboard()
        fallback = FallbackFactory()
        outcome = _engine(primary, fallback).execute("∪")
        assert outcome is DeliveryOutcome.DELIVERED
        assert primary.contents == "∪"
        assert fallback.calls == 0
        assert fallback.clipboard.copy_calls == 0

    def test_both_calls_made_even_when_set_fails(self):
        primary = StubClipboard(set_fails=True, get_fails=True)
        _engine(primary, FallbackFactory()).execute("∪")
        assert primary.copy_calls == 1
        assert primary.paste_calls == 1

    def test_remote_get_failure_is_delivered(self):
        primary = StubClipboard(get_fails=True)
        fallback = FallbackFactory()
        outcome = _engine(primary, fallback, environ=REMOTE).execute("−")
        assert outcome is DeliveryOutcome.DELIVERED
        assert fallback.calls == 0

    def test_custom_remote_session_variable(self):
        primary = StubClipboard(get_fails=True)
        fallback = FallbackFactory()
        engine = _engine(primary, fallback, environ={"MOSH_SESSION": "1"}, var="MOSH_SESSION")
        assert engine.remote
        assert engine.execute("−") is DeliveryOutcome.DELIVERED
        assert fallback.calls == 0


class TestFallbackTier:
    def test_empty_after_set_triggers_fallback_once(self):
        primary = StubClipboard(stores=False)
        fallback = FallbackFactory()
        outcome = _engine(primary, fallback).execute("≈")
        assert outcome is DeliveryOutcome.DELIVERED_UNCONFIRMED
        assert fallback.calls == 1
        assert fallback.clipboard.copy_calls == 1
        assert fallback.clipboard.contents == "≈"

    def test_fallback_is_not_reprobed(self):
        fallback = FallbackFactory()
        _engine(StubClipboard(stores=False), fallback).execute("≈")
        assert fallback.clipboard.paste_calls == 0

    def test_unresponsive_local_triggers_fallback(self):
        primary = StubClipboard(set_fails=True, get_fails=True)
        fallback = FallbackFactory()
        outcome = _engine(primary, fallback).execute("×")
        assert outcome is DeliveryOutcome.DELIVERED_UNCONFIRMED
        assert fallback.calls == 1

    def test_unresponsive_remote_triggers_fallback(self):
        primary = StubClipboard(set_fails=True, get_fails=True)
        fallback = FallbackFactory()
        outcome = _engine(primary, fallback, environ=REMOTE).execute("×")
        assert outcome is DeliveryOutcome.DELIVERED_UNCONFIRMED
        assert fallback.calls == 1

    def test_local_get_failure_triggers_fallback(self):
        primary = StubClipboard(get_fails=True)
        fallback = FallbackFactory()
        outcome = _engine(primary, fallback).execute("÷")
        assert outcome is DeliveryOutcome.DELIVERED_UNCONFIRMED
        assert fallback.calls == 1

    def test_fallback_set_failure_is_failed(self, caplog: pytest.LogCaptureFixture):
        primary = StubClipboard(set_fails=True, get_fails=True)
        fallback = FallbackFactory(clipboard=StubClipboard(set_fails=True))
        with caplog.at_level(logging.WARNING):
            outcome = _engine(primary, fallback).execute("°")
        assert outcome is DeliveryOutcome.FAILED
        assert "could not be populated" in caplog.text

    def test_fallback_construction_failure_is_contained(self):
        primary = StubClipboard(stores=False)
        fallback = FallbackFactory(error=BackendUnavailableError("no display"))
        outcome = _engine(primary, fallback).execute("°")
        assert outcome is DeliveryOutcome.FAILED
        assert fallback.calls == 1

    def test_unexpected_fallback_errors_are_contained(self, caplog: pytest.LogCaptureFixture):
        primary = StubClipboard(stores=False)
        fallback = FallbackFactory(error=RuntimeError("bug"))
        with caplog.at_level(logging.WARNING):
            outcome = _engine(primary, fallback).execute("°")
        assert outcome is DeliveryOutcome.FAILED
        assert "fallback backend crashed" in caplog.text

    def test_undecodable_local_readback_falls_back(self, monkeypatch):
        def undecodable():
            return b"caf\xe9".decode("utf-8")

        monkeypatch.setattr(pyperclip, "copy", lambda text: None)
        monkeypatch.setattr(pyperclip, "paste", undecodable)
        primary = AnywhereClipboard(SessionContext())
        fallback = FallbackFactory()

        outcome = _engine(primary, fallback).execute("°")

        assert outcome is DeliveryOutcome.DELIVERED_UNCONFIRMED
        assert fallback.calls == 1
        assert fallback.clipboard.contents == "°"


# ---------------------------------------------------------------------------
# CopySymbol use case
# ---------------------------------------------------------------------------


class TestCopySymbolUseCase:
    def test_delivers_resolved_character(self):
        primary = StubClipboard()
        uc = CopySymbolUseCase(engine=_engine(primary, FallbackFactory()))
        result = uc.execute(Symbol.INTERSECTION)
        assert result.character.text == "∩"
        assert result.outcome is DeliveryOutcome.DELIVERED
        assert primary.contents == "∩"

    def test_reports_failure(self):
        primary = StubClipboard(set_fails=True, get_fails=True)
        fallback = FallbackFactory(error=BackendUnavailableError("none"))
        uc = CopySymbolUseCase(engine=_engine(primary, fallback))
        result = uc.execute(Symbol.PRIME)
        assert result.character.text == "′"
        assert result.outcome is DeliveryOutcome.FAILED
