"""Tests for git and package manager process runners."""
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

from frontgen.services.git_manager import GitManager
from frontgen.services.package_manager import PackageManager


class TestGitManager:
    """Test GitManager operations."""

    def test_clone_mock_mode(self):
        """Mock mode never spawns processes."""
        with patch('subprocess.run') as mock_run:
            manager = GitManager(mock=True)
            assert manager.clone("https://github.com/user/repo.git", Path("app")) is True
            assert manager.init(Path("app")) is True
            assert manager.add_remote(Path("app"), "https://github.com/user/app.git") is True
            mock_run.assert_not_called()

    @patch('subprocess.run')
    def test_clone(self, mock_run):
        mock_run.return_value = Mock(returncode=0, stdout="", stderr="")

        result = GitManager().clone("https://github.com/user/repo.git", Path("my-app"))

        assert result is True
        assert mock_run.call_args[0][0] == [
            'git', 'clone', 'https://github.com/user/repo.git', 'my-app'
        ]

    @patch('subprocess.run')
    def test_init_runs_in_repo_dir(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        assert GitManager().init(Path("my-app")) is True
        assert mock_run.call_args[0][0] == ['git', 'init']
        assert mock_run.call_args[1]['cwd'] == Path("my-app")

    @patch('subprocess.run')
    def test_add_remote_defaults_to_origin(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        assert GitManager().add_remote(Path("my-app"), "https://github.com/user/app.git") is True
        assert mock_run.call_args[0][0] == [
            'git', 'remote', 'add', 'origin', 'https://github.com/user/app.git'
        ]
        assert mock_run.call_args[1]['cwd'] == Path("my-app")

    @patch('subprocess.run')
    def test_clone_failure(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            128, ['git', 'clone'], stderr="fatal: repository not found"
        )

        assert GitManager().clone("https://github.com/user/missing.git", Path("x")) is False

    @patch('subprocess.run')
    def test_git_not_installed(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")

        assert GitManager().init(Path("x")) is False


class TestPackageManager:
    """Test dependency installation."""

    @patch('subprocess.run')
    def test_install(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        assert PackageManager().install(Path("my-app")) is True
        assert mock_run.call_args[0][0] == ['npm', 'install']
        assert mock_run.call_args[1]['cwd'] == Path("my-app")

    @patch('subprocess.run')
    def test_custom_executable(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        PackageManager("pnpm").install(Path("my-app"))
        assert mock_run.call_args[0][0] == ['pnpm', 'install']

    @patch('subprocess.run')
    def test_install_failure(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(1, ['npm', 'install'])

        assert PackageManager().install(Path("my-app")) is False

    def test_mock_mode(self):
        with patch('subprocess.run') as mock_run:
            assert PackageManager(mock=True).install(Path("my-app")) is True
            mock_run.assert_not_called()
