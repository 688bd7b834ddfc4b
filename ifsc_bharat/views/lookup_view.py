"""State container for the single-field IFSC lookup form."""

from __future__ import annotations

import time
from typing import Callable

from ifsc_bharat.ingestion.models import BranchRecord
from ifsc_bharat.ingestion.razorpay import get_bank_details_by_ifsc
from ifsc_bharat.readout.speaker import VoiceReadout
from ifsc_bharat.utils.ifsc import (
    FETCH_FAILED_MESSAGE,
    check_ifsc,
    format_warning,
    normalise_ifsc_input,
)
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

COPIED_FEEDBACK_SECONDS = 2.0


def _system_clipboard(value: str) -> None:
    import pyperclip

    pyperclip.copy(value)


class LookupView:
    """Track what the lookup form shows and apply user actions to it.

    Each search is stamped with a generation number. A completion for an
    older generation is dropped, so a slow response can never overwrite the
    result of a search started after it.
    """

    def __init__(
        self,
        lookup: Callable[[str], BranchRecord | None] = get_bank_details_by_ifsc,
        *,
        readout: VoiceReadout | None = None,
        readout_factory: Callable[[], VoiceReadout] = VoiceReadout,
        clipboard: Callable[[str], None] = _system_clipboard,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lookup = lookup
        self._readout = readout
        self._readout_factory = readout_factory
        self._clipboard = clipboard
        self._clock = clock
        self.code = ""
        self.format_warning: str | None = None
        self.error: str | None = None
        self.loading = False
        self.record: BranchRecord | None = None
        self.audio_enabled = True
        self.generation = 0
        self._copied_until: float | None = None

    def set_code(self, raw: str | None) -> str:
        """Store upper-cased input and refresh the advisory format warning."""

        self.code = normalise_ifsc_input(raw)
        self.format_warning = format_warning(self.code)
        return self.code

    def begin_search(self) -> int | None:
        """Validate the current code and open a new search generation.

        Returns the generation token, or ``None`` when validation failed and
        no request should be issued.
        """

        problem = check_ifsc(self.code)
        if problem is not None:
            self.error = problem
            return None
        self.generation += 1
        self.loading = True
        self.error = None
        self.record = None
        self._copied_until = None
        return self.generation

    def complete_search(self, token: int, record: BranchRecord | None) -> bool:
        """Apply a lookup result; stale tokens are ignored."""

        if token != self.generation:
            LOGGER.debug("Discarding stale lookup result for generation %s", token)
            return False
        self.loading = False
        self.record = record
        if record is None:
            self.error = FETCH_FAILED_MESSAGE
        return True

    def search(self) -> BranchRecord | None:
        token = self.begin_search()
        if token is None:
            return None
        record: BranchRecord | None = None
        try:
            record = self._lookup(self.code)
        finally:
            self.complete_search(token, record)
        return self.record

    def copy_ifsc(self, now: float | None = None) -> bool:
        """Copy the resolved IFSC code to the clipboard."""

        if self.record is None:
            return False
        try:
            self._clipboard(self.record.ifsc)
        except RuntimeError as exc:
            LOGGER.warning("Unable to copy IFSC to clipboard: %s", exc)
            return False
        current = self._clock() if now is None else now
        self._copied_until = current + COPIED_FEEDBACK_SECONDS
        return True

    def is_copied(self, now: float | None = None) -> bool:
        if self._copied_until is None:
            return False
        current = self._clock() if now is None else now
        return current < self._copied_until

    @property
    def readout(self) -> VoiceReadout:
        if self._readout is None:
            self._readout = self._readout_factory()
            self._readout.enabled = self.audio_enabled
        return self._readout

    def toggle_audio(self) -> bool:
        self.audio_enabled = not self.audio_enabled
        if self._readout is not None:
            self._readout.enabled = self.audio_enabled
        return self.audio_enabled

    def read_aloud(self) -> bool:
        if self.record is None or not self.audio_enabled:
            return False
        return self.readout.speak(self.record)

    def replay_audio(self) -> bool:
        if not self.audio_enabled or self._readout is None:
            return False
        return self._readout.replay()


__all__ = ["COPIED_FEEDBACK_SECONDS", "LookupView"]
