"""Shared test fixtures for frontgen tests."""
import pytest

from frontgen.core.config import ENV_VARS, FrontgenConfig, set_config
from frontgen.models.params import ScaffoldParameters
from tests.template_fixtures import StubLicenses, write_template


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Use built-in defaults, never the developer's own config file."""
    for var in list(ENV_VARS.values()) + ["FRONTGEN_CONFIG", "FRONTGEN_MOCK"]:
        monkeypatch.delenv(var, raising=False)
    config = FrontgenConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def params():
    return ScaffoldParameters(
        app_name="Acme Tool",
        package_name="acme-tool",
        author="Jane Doe",
        description="Tools for the discerning coyote.",
        version="2.0.1",
        license="MIT",
        repository_url="https://github.com/acme/acme-tool.git",
    )


@pytest.fixture
def template_dir(tmp_path):
    return write_template(tmp_path / "acme-tool")


@pytest.fixture
def stub_licenses():
    return StubLicenses()
