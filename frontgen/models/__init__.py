"""Data models for frontgen."""
from frontgen.models.params import (
    ScaffoldParameters,
    StepResult,
    validate_app_name,
    validate_version,
)

__all__ = [
    'ScaffoldParameters',
    'StepResult',
    'validate_app_name',
    'validate_version',
]
