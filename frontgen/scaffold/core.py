"""Core scaffolding pipeline for new front-end projects."""
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from frontgen.core.config import FrontgenConfig, get_config
from frontgen.core.errors import ScaffoldError
from frontgen.core.logger import get_logger
from frontgen.models.params import ScaffoldParameters, StepResult
from frontgen.scaffold.rewrite import TemplateRewriter
from frontgen.services.git_manager import GitManager
from frontgen.services.license_registry import LicenseLookup, SpdxLicenseRegistry, write_license
from frontgen.services.package_manager import PackageManager

logger = get_logger(__name__)

# Removed from every clone before the project gets its own history
TEMPLATE_METADATA = [".git", ".github", "package-lock.json"]


@dataclass
class ScaffoldStep:
    """One fallible step; fatal steps stop the run when they fail."""
    name: str
    action: Callable[[], bool]
    fatal: bool = True


class ScaffoldManager:
    """Turns the template repository into a new project."""

    def __init__(
        self,
        params: ScaffoldParameters,
        base_dir: Optional[Path] = None,
        config: Optional[FrontgenConfig] = None,
        git: Optional[GitManager] = None,
        packages: Optional[PackageManager] = None,
        licenses: Optional[LicenseLookup] = None,
    ):
        self.params = params
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.config = config or get_config()
        self.git = git or GitManager()
        self.packages = packages or PackageManager(self.config.package_manager)
        self.licenses = licenses or SpdxLicenseRegistry(
            self.config.license_registry_url, timeout=self.config.network_timeout
        )

    @property
    def app_dir(self) -> Path:
        return self.params.app_dir(self.base_dir)

    def steps(self) -> List[ScaffoldStep]:
        """Ordered pipeline for one run."""
        return [
            ScaffoldStep("clone template", self._clone),
            ScaffoldStep("remove template metadata", self._strip_metadata, fatal=False),
            ScaffoldStep("rewrite template files", self._rewrite),
            ScaffoldStep("generate LICENSE", self._license, fatal=False),
            ScaffoldStep("initialize git repository", self._init_repo),
            ScaffoldStep("add git remote", self._add_remote, fatal=False),
            ScaffoldStep("install dependencies", self._install),
        ]

    def run(self) -> List[StepResult]:
        """Run every step in order.

        Raises:
            ScaffoldError: If a fatal step fails
        """
        results = []
        for step in self.steps():
            try:
                ok = step.action()
                message = ""
            except OSError as e:
                ok = False
                message = str(e)

            results.append(StepResult(name=step.name, ok=ok, fatal=step.fatal, message=message))
            if ok:
                continue
            if step.fatal:
                raise ScaffoldError(step.name, message or None)
            logger.warning(f"Continuing after failed step '{step.name}'" + (f": {message}" if message else ""))
        return results

    def _clone(self) -> bool:
        logger.info(f"Cloning into {self.app_dir}...")
        return self.git.clone(self.config.template_url, self.app_dir)

    def _strip_metadata(self) -> bool:
        logger.info("Removing template git history, CI configuration and package lock...")
        for name in TEMPLATE_METADATA:
            path = self.app_dir / name
            if path.is_dir():
                shutil.rmtree(path)
            elif path.exists():
                path.unlink()
            else:
                logger.debug(f"{name} not present, nothing to remove")
        return True

    def _rewrite(self) -> bool:
        TemplateRewriter(self.app_dir, self.params).rewrite_all()
        return True

    def _license(self) -> bool:
        logger.info("Updating LICENSE...")
        return write_license(self.app_dir, self.params.license, self.params.author, self.licenses)

    def _init_repo(self) -> bool:
        logger.info("Starting new git repository...")
        return self.git.init(self.app_dir)

    def _add_remote(self) -> bool:
        url = self.params.repository_url
        if not url:
            logger.warning("Skipping adding git remote, no repository information...")
            return True
        logger.info(f'Adding git remote "origin" for {url}...')
        return self.git.add_remote(self.app_dir, url)

    def _install(self) -> bool:
        logger.info("Installing dependencies...")
        return self.packages.install(self.app_dir)
