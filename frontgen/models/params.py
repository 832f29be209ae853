"""Scaffold parameter models."""
import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from frontgen.core.errors import ValidationError

VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")


def validate_app_name(value: str) -> str:
    """Reject an empty or blank application name."""
    if not value or not value.strip():
        raise ValidationError("App name cannot be empty")
    return value


def validate_version(value: str) -> str:
    """Accept only MAJOR.MINOR.PATCH with numeric parts."""
    if not VERSION_PATTERN.fullmatch(value or ""):
        raise ValidationError(f"Version must look like MAJOR.MINOR.PATCH (e.g. 0.1.0), got '{value}'")
    return value


class ScaffoldParameters(BaseModel):
    """Everything a run needs to know about the project being generated."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    app_name: str
    package_name: str
    author: str = ""
    description: str = ""
    version: str = "0.1.0"
    license: str = "MIT"
    repository_url: str = ""

    @field_validator('app_name')
    @classmethod
    def check_app_name(cls, v: str) -> str:
        return validate_app_name(v)

    @field_validator('package_name')
    @classmethod
    def check_package_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValidationError("Package name cannot be empty")
        return v

    @field_validator('version')
    @classmethod
    def check_version(cls, v: str) -> str:
        return validate_version(v)

    def app_dir(self, base: Path) -> Path:
        """Directory the scaffold is generated into."""
        return Path(base) / self.package_name


@dataclass
class StepResult:
    """Outcome of one pipeline step."""
    name: str
    ok: bool
    fatal: bool
    message: str = ""
