"""Tests for the scaffolding pipeline."""
import json

import pytest

from frontgen.core.errors import ScaffoldError
from frontgen.scaffold.core import ScaffoldManager
from tests.template_fixtures import StubLicenses, write_template


class FakeGit:
    """Records git calls; clone writes a copy of the template."""

    def __init__(self, clone_ok=True, remote_ok=True):
        self.calls = []
        self.clone_ok = clone_ok
        self.remote_ok = remote_ok

    def clone(self, url, destination):
        self.calls.append(("clone", url, destination))
        if self.clone_ok:
            write_template(destination)
        return self.clone_ok

    def init(self, repo_dir):
        self.calls.append(("init", repo_dir))
        return True

    def add_remote(self, repo_dir, url, name="origin"):
        self.calls.append(("remote", repo_dir, url, name))
        return self.remote_ok


class FakePackages:
    def __init__(self, ok=True):
        self.installed = []
        self.ok = ok

    def install(self, project_dir):
        self.installed.append(project_dir)
        return self.ok


def _manager(params, tmp_path, git=None, packages=None, licenses=None):
    return ScaffoldManager(
        params,
        base_dir=tmp_path,
        git=git or FakeGit(),
        packages=packages or FakePackages(),
        licenses=licenses or StubLicenses(),
    )


class TestScaffoldManager:
    """Test the ordered step pipeline."""

    def test_full_run(self, params, tmp_path, default_config):
        git = FakeGit()
        packages = FakePackages()
        manager = _manager(params, tmp_path, git=git, packages=packages)

        results = manager.run()
        app_dir = tmp_path / "acme-tool"

        assert [r.name for r in results] == [
            "clone template",
            "remove template metadata",
            "rewrite template files",
            "generate LICENSE",
            "initialize git repository",
            "add git remote",
            "install dependencies",
        ]
        assert all(r.ok for r in results)

        assert git.calls == [
            ("clone", default_config.template_url, app_dir),
            ("init", app_dir),
            ("remote", app_dir, "https://github.com/acme/acme-tool.git", "origin"),
        ]
        assert packages.installed == [app_dir]

        # Template history and CI config are gone
        assert not (app_dir / ".git").exists()
        assert not (app_dir / ".github").exists()
        assert not (app_dir / "package-lock.json").exists()

        assert json.loads((app_dir / "package.json").read_text())["name"] == "acme-tool"
        assert "Jane Doe" in (app_dir / "LICENSE").read_text()

    def test_no_repository_url_skips_remote(self, params, tmp_path, caplog):
        git = FakeGit()
        params = params.model_copy(update={"repository_url": ""})

        results = _manager(params, tmp_path, git=git).run()

        assert [call[0] for call in git.calls] == ["clone", "init"]
        assert results[-2].name == "add git remote" and results[-2].ok
        assert "Skipping adding git remote" in caplog.text

    def test_clone_failure_is_fatal(self, params, tmp_path):
        git = FakeGit(clone_ok=False)
        packages = FakePackages()

        with pytest.raises(ScaffoldError) as exc_info:
            _manager(params, tmp_path, git=git, packages=packages).run()

        assert exc_info.value.step == "clone template"
        assert [call[0] for call in git.calls] == ["clone"]
        assert packages.installed == []

    def test_missing_template_file_is_fatal(self, params, tmp_path):
        class PartialGit(FakeGit):
            def clone(self, url, destination):
                super().clone(url, destination)
                (destination / "index.html").unlink()
                return True

        with pytest.raises(ScaffoldError) as exc_info:
            _manager(params, tmp_path, git=PartialGit()).run()

        assert exc_info.value.step == "rewrite template files"
        assert "index.html" in str(exc_info.value)

    def test_unknown_license_continues(self, params, tmp_path, caplog):
        params = params.model_copy(update={"license": "NOT-A-REAL-LICENSE"})
        packages = FakePackages()

        results = _manager(params, tmp_path, packages=packages).run()

        license_step = next(r for r in results if r.name == "generate LICENSE")
        assert license_step.ok is False
        assert license_step.fatal is False
        assert not (tmp_path / "acme-tool" / "LICENSE").exists()
        assert "NOT-A-REAL-LICENSE" in caplog.text
        assert packages.installed == [tmp_path / "acme-tool"]

    def test_remote_failure_is_not_fatal(self, params, tmp_path, caplog):
        packages = FakePackages()

        results = _manager(params, tmp_path, git=FakeGit(remote_ok=False), packages=packages).run()

        remote = next(r for r in results if r.name == "add git remote")
        assert remote.ok is False
        assert remote.fatal is False
        assert packages.installed == [tmp_path / "acme-tool"]
        assert "Continuing after failed step 'add git remote'" in caplog.text

    def test_install_failure_is_fatal(self, params, tmp_path):
        with pytest.raises(ScaffoldError) as exc_info:
            _manager(params, tmp_path, packages=FakePackages(ok=False)).run()

        assert exc_info.value.step == "install dependencies"

    def test_metadata_removal_tolerates_missing_entries(self, params, tmp_path):
        class BareGit(FakeGit):
            def clone(self, url, destination):
                super().clone(url, destination)
                (destination / "package-lock.json").unlink()
                return True

        results = _manager(params, tmp_path, git=BareGit()).run()
        assert results[1].ok
