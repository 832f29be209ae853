"""Exception types raised by frontgen."""
from typing import Optional


class FrontgenError(Exception):
    """Base class for errors reported by the generator."""


class ValidationError(FrontgenError, ValueError):
    """A parameter value was rejected (empty app name, malformed version)."""


class LicenseLookupError(FrontgenError):
    """License text could not be resolved."""


class RegistryUnavailable(LicenseLookupError):
    """The SPDX registry did not answer with a success status."""


class LicenseNotFound(LicenseLookupError):
    """The SPDX registry has no license with the requested identifier."""

    def __init__(self, license_id: str):
        self.license_id = license_id
        super().__init__(f"License '{license_id}' not found in SPDX registry")


class ScaffoldError(FrontgenError):
    """A step that the scaffold cannot continue without has failed."""

    def __init__(self, step: str, reason: Optional[str] = None):
        self.step = step
        self.reason = reason
        message = f"Step '{step}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
