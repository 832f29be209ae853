"""Text rewrites applied to the cloned template.

Every rewrite replaces the first match only. A file that lacks the expected
marker is left as it is; the template layout is assumed to be stable.
"""
import json
import re
from pathlib import Path
from typing import Callable, List, Tuple

from frontgen.core.logger import get_logger
from frontgen.models.params import ScaffoldParameters

logger = get_logger(__name__)

TITLE_TAG = re.compile(r"<title>[^<]+</title>")
HEADING_TAG = re.compile(r"<h1>[^<]+</h1>")

# README edits run in this order; later patterns rely on the "Requirements",
# "License" and "Deployment" headers still being present.
README_TITLE = re.compile(r".*(\s)+(=+)")
README_DESCRIPTION = re.compile(r"(=+\s+)(.+)Requirements", re.DOTALL)
README_INSTALLATION = re.compile(r"(Installation\s+-+).+manually:", re.DOTALL)
README_CLONE = re.compile(r"git clone [^`\s]+")
README_LICENSE = re.compile(r"(License\s+-+.*?)\bMIT\b", re.DOTALL)
README_USAGE = re.compile(r"Usage\s+-+.+Deployment", re.DOTALL)


def _manifest_field(text: str, key: str, value: str) -> str:
    pattern = re.compile(r'"%s": "(?:[^"\\]|\\.)+"' % re.escape(key))
    escaped = json.dumps(value)[1:-1]
    return pattern.sub(lambda m: f'"{key}": "{escaped}"', text, count=1)


def rewrite_manifest(text: str, params: ScaffoldParameters) -> str:
    """Set name, version, description, author, license and repository url."""
    for key, value in (
        ("name", params.package_name),
        ("version", params.version),
        ("description", params.description),
        ("author", params.author),
        ("license", params.license),
        ("url", params.repository_url),
    ):
        text = _manifest_field(text, key, value)
    return text


def rewrite_index_html(text: str, params: ScaffoldParameters) -> str:
    return TITLE_TAG.sub(lambda m: f"<title>{params.app_name}</title>", text, count=1)


def rewrite_home_page(text: str, params: ScaffoldParameters) -> str:
    return HEADING_TAG.sub(lambda m: f"<h1>{params.app_name}</h1>", text, count=1)


def rewrite_readme(text: str, params: ScaffoldParameters) -> str:
    """Retitle the README and drop the template's own instructions."""
    app_name = params.app_name
    text = README_TITLE.sub(
        lambda m: f"{app_name}{m.group(1)}{'=' * len(app_name)}", text, count=1
    )
    text = README_DESCRIPTION.sub(
        lambda m: f"{m.group(1)}{params.description}\n\nRequirements", text, count=1
    )
    text = README_INSTALLATION.sub(lambda m: m.group(1), text, count=1)
    text = README_CLONE.sub(lambda m: f"git clone {params.repository_url}", text, count=1)
    text = README_LICENSE.sub(lambda m: f"{m.group(1)}{params.license}", text, count=1)
    text = README_USAGE.sub(lambda m: "Deployment", text, count=1)
    return text


Rewrite = Callable[[str, ScaffoldParameters], str]

TEMPLATE_FILES: List[Tuple[Tuple[str, ...], Rewrite]] = [
    (("package.json",), rewrite_manifest),
    (("index.html",), rewrite_index_html),
    (("src", "pages", "home.vue"), rewrite_home_page),
    (("README.md",), rewrite_readme),
]


class TemplateRewriter:
    """Applies the rewrites to the generated files of a scaffold."""

    def __init__(self, app_dir: Path, params: ScaffoldParameters):
        self.app_dir = Path(app_dir)
        self.params = params

    def rewrite_file(self, relative: Path, rewrite: Rewrite) -> None:
        """Rewrite a single file in place.

        Raises:
            FileNotFoundError: If the template does not contain the file
        """
        path = self.app_dir / relative
        logger.info(f"Updating {relative.as_posix()}...")
        original = path.read_text(encoding="utf-8")
        updated = rewrite(original, self.params)
        if updated == original:
            logger.debug(f"{relative.as_posix()} unchanged")
        path.write_text(updated, encoding="utf-8")

    def rewrite_all(self) -> List[Path]:
        """Rewrite every generated file and return their paths."""
        written = []
        for parts, rewrite in TEMPLATE_FILES:
            relative = Path(*parts)
            self.rewrite_file(relative, rewrite)
            written.append(self.app_dir / relative)
        return written
