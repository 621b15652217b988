"""
Identifier Lookup Client.

Resolves a fund identifier (CNPJ) against the external search service and
returns the canonical page URL of the fund, if any.

Design Notes:
    - One GET per call, no retries, no de-duplication
    - No timeout unless configured
    - Failures are reported to the caller and never touch pipeline state
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from fund_explorer.config.models import LookupConfig
from fund_explorer.domain.value_objects import LookupResult
from fund_explorer.normalization.sort_values import strip_identifier

logger = logging.getLogger(__name__)


class IdentifierLookupError(Exception):
    """Raised when the search service cannot be queried."""

    def __init__(self, message: str, identifier: str) -> None:
        super().__init__(message)
        self.message = message
        self.identifier = identifier


class IdentifierLookupClient:
    """Client for the fund search service."""

    def __init__(
        self,
        config: Optional[LookupConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize lookup client.

        Args:
            config: Service URLs and optional timeout
            session: HTTP session (a new one is created if omitted)
        """
        self.config = config or LookupConfig()
        self._session = session or requests.Session()

    @staticmethod
    def clean_identifier(identifier: str) -> str:
        """Identifier as sent to the service: punctuation removed."""
        return strip_identifier(identifier.strip())

    def search_url(self, identifier: str) -> str:
        cleaned = self.clean_identifier(identifier)
        base = self.config.api_base_url.rstrip("/")
        return f"{base}/{quote(cleaned, safe='')}"

    def resolve(self, identifier: str) -> LookupResult:
        """
        Look up an identifier.

        Args:
            identifier: Identifier as displayed, punctuation allowed

        Returns:
            LookupResult; ``redirect_url`` is None when nothing was found

        Raises:
            IdentifierLookupError: On network failure, non-2xx status or
                an unreadable response body
        """
        cleaned = self.clean_identifier(identifier)
        if not cleaned:
            logger.debug(f"Empty identifier after cleaning: {identifier!r}")
            return LookupResult(identifier=identifier, cleaned_identifier=cleaned)

        url = self.search_url(identifier)
        try:
            response = self._session.get(url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Lookup failed for {identifier}: {e}")
            raise IdentifierLookupError(
                f"Search service request failed: {e}", identifier
            ) from e
        except ValueError as e:
            logger.error(f"Lookup returned unreadable body for {identifier}: {e}")
            raise IdentifierLookupError(
                f"Search service returned invalid JSON: {e}", identifier
            ) from e

        canonical_url = self._canonical_url(payload)
        if canonical_url is None:
            logger.info(f"No search result for {cleaned}")
            return LookupResult(identifier=identifier, cleaned_identifier=cleaned)

        redirect_url = f"{self.config.redirect_base_url.rstrip('/')}/{canonical_url}"
        logger.debug(f"Resolved {cleaned} -> {redirect_url}")
        return LookupResult(
            identifier=identifier,
            cleaned_identifier=cleaned,
            redirect_url=redirect_url,
        )

    @staticmethod
    def _canonical_url(payload: Any) -> Optional[str]:
        """First result's canonical_url, if the payload has one."""
        if not isinstance(payload, list) or not payload:
            return None
        first = payload[0]
        if not isinstance(first, dict):
            return None
        canonical_url = first.get("canonical_url")
        if not canonical_url:
            return None
        return str(canonical_url).lstrip("/")
