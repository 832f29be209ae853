"""Git repository management for generated projects."""
import subprocess
from pathlib import Path
from typing import List, Optional

from frontgen.core.logger import get_logger

logger = get_logger(__name__)


class GitManager:
    """Manages the git operations a scaffold needs."""

    def __init__(self, mock: bool = False):
        self.mock = mock

    def _run(self, cmd: List[str], cwd: Optional[Path] = None) -> bool:
        if self.mock:
            where = f" in {cwd}" if cwd else ""
            logger.info(f"MOCK: Would run '{' '.join(cmd)}'{where}")
            return True

        try:
            subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=True)
            return True
        except subprocess.CalledProcessError as e:
            logger.error(f"Command '{' '.join(cmd)}' failed: {e}")
            if e.stderr:
                logger.error(f"Error output: {e.stderr}")
            return False
        except FileNotFoundError:
            logger.error("git executable not found")
            return False

    def clone(self, url: str, destination: Path) -> bool:
        """Clone a git repository.

        Args:
            url: Git repository URL
            destination: Directory to clone into (must not exist yet)

        Returns:
            True if successful, False otherwise
        """
        return self._run(['git', 'clone', url, str(destination)])

    def init(self, repo_dir: Path) -> bool:
        """Start a fresh repository rooted at repo_dir."""
        return self._run(['git', 'init'], cwd=repo_dir)

    def add_remote(self, repo_dir: Path, url: str, name: str = "origin") -> bool:
        """Register a remote on the repository at repo_dir."""
        return self._run(['git', 'remote', 'add', name, url], cwd=repo_dir)
