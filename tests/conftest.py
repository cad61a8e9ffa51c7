"""
Pytest configuration and shared fixtures for pkgquery tests.
"""

import pytest
from pathlib import Path

from pkgquery.packages.base import PkgInfo
from tests.mocks import FakePkgManager, FakeRunner


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that query the real package managers of this system",
    )


def pytest_collection_modifyitems(config, items):
    """
    Skip integration tests unless --integration flag is provided.
    """
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Command runner without any known commands."""
    return FakeRunner()


@pytest.fixture
def sample_pkgs():
    """A few installed packages."""
    return [
        PkgInfo(name="coreutils", version="8.32-4.1ubuntu1", arch="amd64"),
        PkgInfo(name="libc6", version="2.35-0ubuntu3", arch="amd64"),
        PkgInfo(name="tzdata", version="2024a-0ubuntu0.22.04", arch="all"),
    ]


@pytest.fixture
def primary_pkg_manager() -> FakePkgManager:
    """Primary package manager that owns /usr/bin/ls."""
    return FakePkgManager(
        name="primary",
        primary=True,
        owners={"/usr/bin/ls": "coreutils"},
    )


@pytest.fixture
def secondary_pkg_manager() -> FakePkgManager:
    """Secondary package manager that also claims /usr/bin/ls."""
    return FakePkgManager(
        name="secondary",
        primary=False,
        owners={"/usr/bin/ls": "coreutils-rpm", "/opt/tool/bin/tool": "tool"},
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create sample pkgquery.yaml configuration."""
    config_content = """version: 1
cache:
  size: 100
commands:
  timeout: 30
  locale: C
managers:
  enabled:
    - dpkg
    - pacman
"""
    path = tmp_path / "pkgquery.yaml"
    path.write_text(config_content)
    return path
