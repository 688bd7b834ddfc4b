"""requests-based client for the public Razorpay IFSC API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

import requests

from ifsc_bharat.ingestion.models import BranchRecord
from ifsc_bharat.ingestion.strategy import LookupStrategy
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

RAZORPAY_API_BASE = "https://ifsc.razorpay.com/"
TEXT_FIELDS = ("BANK", "IFSC", "BRANCH", "ADDRESS", "CITY", "DISTRICT", "STATE", "MICR", "CONTACT")
FLAG_FIELDS = ("UPI", "RTGS", "NEFT", "IMPS")
_TRUE_STRINGS = {"true", "yes", "1"}


class IFSCLookupError(RuntimeError):
    """Raised when the IFSC provider cannot produce a usable branch record."""


@dataclass(slots=True)
class LookupConfig:
    """Settings used by :class:`RazorpayIFSCClient`."""

    base_url: str = RAZORPAY_API_BASE
    timeout: float = 30.0
    optimistic_payment_flags: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LookupConfig":
        """Build a config from ``IFSC_BHARAT_*`` environment variables."""

        env = os.environ if environ is None else environ
        config = cls()
        base_url = env.get("IFSC_BHARAT_API_BASE")
        if base_url:
            config.base_url = base_url
        timeout = env.get("IFSC_BHARAT_TIMEOUT")
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError as exc:
                raise ValueError(f"IFSC_BHARAT_TIMEOUT must be a number, got {timeout!r}") from exc
        optimistic = env.get("IFSC_BHARAT_OPTIMISTIC_FLAGS")
        if optimistic:
            config.optimistic_payment_flags = optimistic.strip().lower() in _TRUE_STRINGS
        return config


def _pick(payload: Mapping[str, Any], key: str) -> Any:
    # Upper-case key wins unless its value is falsy.
    return payload.get(key) or payload.get(key.lower())


def _as_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def normalise_branch_payload(
    payload: Mapping[str, Any],
    *,
    optimistic_payment_flags: bool = True,
) -> BranchRecord:
    """Map a provider response with mixed-case keys onto :class:`BranchRecord`.

    With ``optimistic_payment_flags`` (the default) any falsy payment flag is
    reported as supported, so the provider can never mark a branch as lacking
    UPI/RTGS/NEFT/IMPS through this path. Pass ``False`` to keep the
    provider's own values.
    """

    if not isinstance(payload, Mapping):
        raise IFSCLookupError(f"Expected a JSON object from the IFSC provider, got {type(payload).__name__}")

    text = {field: _as_text(_pick(payload, field)) for field in TEXT_FIELDS}
    if not text["IFSC"] and not text["BANK"]:
        raise IFSCLookupError("IFSC provider response does not describe a branch")

    flags: dict[str, bool] = {}
    for field in FLAG_FIELDS:
        value = payload.get(field)
        flags[field] = bool(value) or optimistic_payment_flags

    return BranchRecord(
        bank=text["BANK"] or "",
        ifsc=text["IFSC"] or "",
        branch=text["BRANCH"] or "",
        address=text["ADDRESS"] or "",
        city=text["CITY"] or "",
        district=text["DISTRICT"] or "",
        state=text["STATE"] or "",
        micr=text["MICR"],
        contact=text["CONTACT"],
        upi=flags["UPI"],
        rtgs=flags["RTGS"],
        neft=flags["NEFT"],
        imps=flags["IMPS"],
    )


class RazorpayIFSCClient:
    """Resolve IFSC codes via ``GET <base>/<IFSC>`` on the Razorpay API."""

    def __init__(
        self,
        config: LookupConfig | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or LookupConfig()
        self.session = session or self._build_session()

    @staticmethod
    def _build_session() -> requests.Session:
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})
        return session

    def url_for(self, code: str) -> str:
        base = self.config.base_url
        if not base.endswith("/"):
            base = f"{base}/"
        return f"{base}{code}"

    def fetch(self, code: str) -> BranchRecord:
        """Fetch and normalise branch metadata for an already validated ``code``."""

        url = self.url_for(code)
        LOGGER.info("Looking up IFSC %s", code)
        response = self.session.get(url, timeout=self.config.timeout)
        self._raise_with_context(response, url)
        try:
            payload = response.json()
        except ValueError as exc:
            raise IFSCLookupError(f"IFSC provider returned a non-JSON body for {url}") from exc
        return normalise_branch_payload(
            payload,
            optimistic_payment_flags=self.config.optimistic_payment_flags,
        )

    @staticmethod
    def _raise_with_context(response: requests.Response, url: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            raise IFSCLookupError(
                f"Failed to fetch: IFSC provider responded with HTTP {status} for {url}"
            ) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RazorpayIFSCClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_bank_details_by_ifsc(
    code: str,
    *,
    client: LookupStrategy | None = None,
) -> BranchRecord | None:
    """Return branch metadata for ``code`` or ``None`` when the lookup fails.

    Failures are logged with their cause and never raised; callers must check
    for ``None`` explicitly.
    """

    if client is None:
        with RazorpayIFSCClient(LookupConfig.from_env()) as owned:
            return _fetch_or_none(owned, code)
    return _fetch_or_none(client, code)


def _fetch_or_none(strategy: LookupStrategy, code: str) -> BranchRecord | None:
    try:
        return strategy.fetch(code)
    except (IFSCLookupError, requests.RequestException, ValueError) as exc:
        LOGGER.error("Error fetching bank details for %s: %s", code, exc)
        return None


__all__ = [
    "IFSCLookupError",
    "LookupConfig",
    "RAZORPAY_API_BASE",
    "RazorpayIFSCClient",
    "get_bank_details_by_ifsc",
    "normalise_branch_payload",
]
