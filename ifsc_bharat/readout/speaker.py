"""Text-to-speech playback of branch readouts (pyttsx3 backed)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ifsc_bharat.ingestion.models import BranchRecord
from ifsc_bharat.readout.summary import build_readout_text
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

PREFERRED_VOICE_HINTS = ("female", "woman", "girl")
DEFAULT_WORDS_PER_MINUTE = 200


class SpeechEngine(Protocol):
    """Subset of the pyttsx3 engine API used for playback."""

    def getProperty(self, name: str) -> Any: ...  # pragma: no cover - protocol definition

    def setProperty(self, name: str, value: Any) -> None: ...  # pragma: no cover

    def say(self, text: str) -> None: ...  # pragma: no cover

    def runAndWait(self) -> None: ...  # pragma: no cover

    def stop(self) -> None: ...  # pragma: no cover


@dataclass(slots=True)
class Utterance:
    """A readout ready to hand to the speech engine."""

    text: str
    voice: Any
    rate: float = 0.9
    pitch: float = 1.0
    volume: float = 1.0


def select_voice(voices: Sequence[Any] | None) -> Any | None:
    """Prefer a voice whose name hints at a female speaker, else the first one."""

    if not voices:
        return None
    for voice in voices:
        name = str(getattr(voice, "name", "") or "").lower()
        if any(hint in name for hint in PREFERRED_VOICE_HINTS):
            return voice
    return voices[0]


class VoiceReadout:
    """Speak branch records through a platform speech engine.

    Playback is skipped whenever the engine could not be initialised, audio
    has been disabled, or no voice was resolved at start-up. ``pitch`` is kept
    on the utterance for reference; pyttsx3 drivers expose no pitch property.
    """

    def __init__(
        self,
        engine: SpeechEngine | None = None,
        *,
        enabled: bool = True,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
        autoload: bool = True,
    ) -> None:
        self.enabled = enabled
        self.words_per_minute = words_per_minute
        self.engine: SpeechEngine | None = engine
        if self.engine is None and autoload:
            self.engine = self._init_engine()
        self.voice = self._load_voice()
        self.current: Utterance | None = None

    @staticmethod
    def _init_engine() -> SpeechEngine | None:
        import pyttsx3

        try:
            return pyttsx3.init()
        except (RuntimeError, OSError, ImportError) as exc:
            LOGGER.warning("Speech synthesis unavailable: %s", exc)
            return None

    def _load_voice(self) -> Any | None:
        if self.engine is None:
            return None
        voices = self.engine.getProperty("voices")
        voice = select_voice(voices)
        if voice is None:
            LOGGER.warning("No speech voices installed; readout disabled")
        return voice

    @property
    def available(self) -> bool:
        return self.engine is not None and self.voice is not None

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def prepare(self, record: BranchRecord) -> Utterance:
        return Utterance(text=build_readout_text(record), voice=self.voice)

    def speak(self, record: BranchRecord) -> bool:
        """Read ``record`` aloud, blocking until done; return True when it played."""

        if not self.enabled or not self.available:
            return False
        utterance = self.prepare(record)
        self.current = utterance
        self._play(utterance)
        return True

    def replay(self) -> bool:
        """Re-issue the last utterance, if any."""

        if self.current is None or not self.enabled or not self.available:
            return False
        self._play(self.current)
        return True

    def _play(self, utterance: Utterance) -> None:
        """Speak ``utterance`` and return once the engine has finished.

        Playback is synchronous: ``runAndWait`` blocks the caller. ``stop``
        first discards anything still queued on the engine, such as the rest
        of a readout whose run was interrupted.
        """

        engine = self.engine
        assert engine is not None  # guarded by ``available``
        engine.stop()
        engine.setProperty("rate", int(utterance.rate * self.words_per_minute))
        engine.setProperty("volume", utterance.volume)
        engine.setProperty("voice", getattr(utterance.voice, "id", utterance.voice))
        engine.say(utterance.text)
        engine.runAndWait()


__all__ = ["SpeechEngine", "Utterance", "VoiceReadout", "select_voice"]
