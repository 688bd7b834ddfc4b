"""Human-readable and spoken summaries of branch records."""

from __future__ import annotations

from ifsc_bharat.readout.speaker import Utterance, VoiceReadout, select_voice
from ifsc_bharat.readout.summary import NOT_AVAILABLE, build_readout_text
from ifsc_bharat.readout.support import SUPPORT_EMAILS, get_customer_support_email

__all__ = [
    "NOT_AVAILABLE",
    "SUPPORT_EMAILS",
    "Utterance",
    "VoiceReadout",
    "build_readout_text",
    "get_customer_support_email",
    "select_voice",
]
