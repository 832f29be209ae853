"""SPDX license lookup.

The generator only needs ``lookup(license_id) -> text``; anything providing
that method can stand in for the registry (tests use a stub).
"""
import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import requests

from frontgen.core.errors import LicenseLookupError, LicenseNotFound, RegistryUnavailable
from frontgen.core.logger import get_logger

logger = get_logger(__name__)

YEAR_TOKENS = ("<year>", "<yyyy>", "[yyyy]", "[year]")
HOLDER_TOKENS = (
    "<copyright holders>",
    "<copyright holder>",
    "<owner>",
    "<name of author>",
    "[name of copyright owner]",
    "[fullname]",
)


class LicenseLookup(Protocol):
    def lookup(self, license_id: str) -> str:
        ...


class SpdxLicenseRegistry:
    """Fetches license texts from the SPDX license list.

    The list at ``registry_url`` is JSON with a ``licenses`` array of
    ``{licenseId, detailsUrl}`` entries; each details document carries the
    full ``licenseText``.
    """

    def __init__(self, registry_url: str, timeout: Optional[float] = None, session: Any = None):
        self.registry_url = registry_url
        self.timeout = timeout
        self.http = session or requests

    def _get_json(self, url: str) -> Dict[str, Any]:
        logger.debug(f"Fetching {url}")
        try:
            response = self.http.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise RegistryUnavailable(f"SPDX registry request failed: {e}")
        except ValueError as e:
            raise RegistryUnavailable(f"SPDX registry returned invalid JSON from {url}: {e}")

    def list_licenses(self) -> List[Dict[str, Any]]:
        """Return the registry's license entries."""
        data = self._get_json(self.registry_url)
        if isinstance(data, dict):
            data = data.get("licenses", [])
        if not isinstance(data, list):
            raise RegistryUnavailable(f"Unexpected license list format from {self.registry_url}")
        return data

    def find(self, license_id: str) -> Dict[str, Any]:
        """Find a registry entry by exact (case-sensitive) identifier."""
        for entry in self.list_licenses():
            if not isinstance(entry, dict):
                raise RegistryUnavailable(f"Malformed license entry in {self.registry_url}: {entry!r}")
            if entry.get("licenseId") == license_id:
                return entry
        raise LicenseNotFound(license_id)

    def lookup(self, license_id: str) -> str:
        entry = self.find(license_id)
        details_url = entry.get("detailsUrl")
        if not details_url:
            raise RegistryUnavailable(f"No details URL for license '{license_id}'")

        details = self._get_json(details_url)
        text = details.get("licenseText") if isinstance(details, dict) else None
        if not text:
            raise RegistryUnavailable(f"No license text for '{license_id}' at {details_url}")
        return text


def render_license_text(text: str, holder: str, year: Optional[int] = None) -> str:
    """Fill the copyright year and holder placeholders of an SPDX license body."""
    year = year or datetime.date.today().year
    for token in YEAR_TOKENS:
        text = text.replace(token, str(year))
    for token in HOLDER_TOKENS:
        text = text.replace(token, holder)
    return text


def write_license(
    app_dir: Path,
    license_id: str,
    author: str,
    lookup: LicenseLookup,
    year: Optional[int] = None,
) -> bool:
    """Write LICENSE for license_id, or make sure none exists when lookup fails.

    Returns:
        True if a LICENSE file was written, False if it was skipped
    """
    license_file = Path(app_dir) / "LICENSE"
    try:
        text = lookup.lookup(license_id)
        license_file.write_text(render_license_text(text, author, year))
    except (LicenseLookupError, OSError) as e:
        logger.warning(f"Skipping LICENSE: {e}")
        if license_file.exists():
            license_file.unlink()
        return False
    return True
