"""Front-end project scaffolding.

Clones the starter template and rewrites it into a new project.
"""

from .core import ScaffoldManager, ScaffoldStep
from .rewrite import TemplateRewriter

__all__ = [
    "ScaffoldManager",
    "ScaffoldStep",
    "TemplateRewriter",
]
