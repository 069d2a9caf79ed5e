"""
Shared fixtures for CLI tests
"""
import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click test runner"""
    return CliRunner()


@pytest.fixture
def base_args(tmp_path):
    """Global options pointing settings and logs at a temp directory"""
    return ["--base-dir", str(tmp_path / "palcheck")]
