"""Dependency installation through the project's package manager."""
import subprocess
from pathlib import Path

from frontgen.core.logger import get_logger

logger = get_logger(__name__)


class PackageManager:
    """Runs ``<executable> install`` inside a project directory."""

    def __init__(self, executable: str = "npm", mock: bool = False):
        self.executable = executable
        self.mock = mock

    def install(self, project_dir: Path) -> bool:
        """Install the dependencies declared by the project's manifest.

        Output is streamed to the terminal since installs can take a while.
        """
        cmd = [self.executable, 'install']

        if self.mock:
            logger.info(f"MOCK: Would run '{' '.join(cmd)}' in {project_dir}")
            return True

        try:
            subprocess.run(cmd, cwd=project_dir, check=True)
            return True
        except subprocess.CalledProcessError as e:
            logger.error(f"{self.executable} install failed with exit code {e.returncode}")
            return False
        except FileNotFoundError:
            logger.error(f"{self.executable} executable not found")
            return False
