"""Parameter resolution: command-line values first, interactive prompts otherwise."""
import re
import unicodedata
from typing import Callable, Optional

import typer

from frontgen.core.config import FrontgenConfig, get_config
from frontgen.core.errors import ValidationError
from frontgen.core.logger import console, get_logger
from frontgen.models.params import ScaffoldParameters, validate_app_name, validate_version

logger = get_logger(__name__)

DEFAULT_VERSION = "0.1.0"

PromptFunc = Callable[[str, Optional[str]], str]
Validator = Callable[[str], str]

__all__ = [
    "DEFAULT_VERSION",
    "ParameterResolver",
    "default_package_name",
    "typer_prompt",
    "validate_app_name",
    "validate_version",
]

# Characters NFKD cannot decompose into ASCII
SLUG_CHARMAP = {"&": " and ", "ß": "ss", "æ": "ae", "ø": "o", "đ": "d", "ł": "l", "œ": "oe"}


def default_package_name(app_name: str) -> str:
    """Slugify an app name into a package name.

    Lowercases, spells out the characters in SLUG_CHARMAP, transliterates to
    ASCII, turns whitespace into dashes and drops everything else that is not
    a letter, digit or dash.

    >>> default_package_name("My App")
    'my-app'
    """
    spelled = "".join(SLUG_CHARMAP.get(ch, ch) for ch in app_name.lower())
    ascii_name = (
        unicodedata.normalize("NFKD", spelled)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9\s-]", "", ascii_name)
    slug = re.sub(r"[\s-]+", "-", slug)
    return slug.strip("-")


def typer_prompt(message: str, default: Optional[str] = None) -> str:
    """Ask on the terminal; an empty answer falls back to the default."""
    return typer.prompt(
        message,
        default=default if default is not None else "",
        show_default=bool(default),
    )


class ParameterResolver:
    """Resolves the seven scaffold parameters in a fixed order.

    Later defaults depend on earlier answers (the package name default is
    derived from the app name), so resolution is strictly sequential.
    """

    def __init__(self, prompt: Optional[PromptFunc] = None, config: Optional[FrontgenConfig] = None):
        self.prompt = prompt or typer_prompt
        self.config = config or get_config()

    def ask(
        self,
        value: Optional[str],
        message: str,
        default: Optional[str] = None,
        validator: Optional[Validator] = None,
        required: bool = False,
    ) -> str:
        """Return ``value`` when given, otherwise prompt until the answer is valid."""
        if value:
            return value

        while True:
            answer = self.prompt(message, default)
            if answer is None:
                answer = ""
            if validator:
                try:
                    validator(answer)
                except ValidationError as e:
                    console.print(f"[red]✗[/red] {e}")
                    continue
            if required and not answer.strip():
                console.print("[red]✗[/red] A value is required")
                continue
            return answer

    def resolve(
        self,
        app_name: Optional[str] = None,
        package_name: Optional[str] = None,
        author: Optional[str] = None,
        description: Optional[str] = None,
        version: Optional[str] = None,
        license: Optional[str] = None,
        repository_url: Optional[str] = None,
    ) -> ScaffoldParameters:
        app_name = self.ask(app_name, "Name of app", validator=validate_app_name)
        package_name = self.ask(
            package_name,
            "Package name",
            default=default_package_name(app_name),
            required=True,
        )
        author = self.ask(author, "Author", default=self.config.default_author or None)
        description = self.ask(description, "Description")
        version = self.ask(version, "Initial version", default=DEFAULT_VERSION, validator=validate_version)
        license = self.ask(license, "License", default=self.config.default_license, required=True)
        repository_url = self.ask(repository_url, "Repository URL")

        logger.debug(f"Resolved parameters for {app_name} ({package_name})")
        return ScaffoldParameters(
            app_name=app_name,
            package_name=package_name,
            author=author,
            description=description,
            version=version,
            license=license,
            repository_url=repository_url,
        )
