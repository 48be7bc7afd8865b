"""Export of the profile, logs and daily summary to a spreadsheet web app."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol

from nutritrack.domain.profile import Profile
from nutritrack.services.state import StateStore
from nutritrack.services.stats import build_export

_logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """Raised when an export cannot be sent."""


class ExportClient(Protocol):
    """Interface for delivering the export document."""

    async def post_document(self, url: str, document: dict[str, object]) -> None:
        """Send the document to the export endpoint."""


def validate_export_url(url: str) -> None:
    """Ensure the URL looks like a deployed Apps Script web app."""
    if not url:
        raise ExportError("No export URL is configured")
    if "script.google.com" not in url or not url.endswith("exec"):
        raise ExportError("Export URL must be a deployed web app URL ending in /exec")


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ExportService:
    """Builds the export document and hands it to the export client."""

    client: ExportClient
    store: StateStore
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def sync(self) -> Profile:
        """Send the export and stamp the profile's last sync time."""
        state = self.store.state
        url = state.profile.export_url
        validate_export_url(url)
        synced_at = self.clock().isoformat()
        document = build_export(state, synced_at)
        try:
            await self.client.post_document(url, document)
        except Exception as exc:
            _logger.exception("Export request failed")
            raise ExportError("Export failed, please check the connection") from exc
        profile = replace(self.store.state.profile, last_sync=synced_at)
        self.store.commit(profile=profile)
        _logger.info("Exported %s daily rows", len(document["daily_summary"]))
        return profile
