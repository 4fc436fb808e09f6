"""Shared fixtures for claude-config tests."""

import pytest
from click.testing import CliRunner

from claude_config.gateway.home_files.fake import FakeHomeFiles
from claude_config.sources import VendorSources
from tests.test_utils.context_builders import FAKE_SOURCES, seed_source_files


@pytest.fixture
def vendor_sources() -> VendorSources:
    """Vendored checkouts at fake locations (never the real filesystem)."""
    return FAKE_SOURCES


@pytest.fixture
def seeded_home_files(vendor_sources: VendorSources) -> FakeHomeFiles:
    """FakeHomeFiles where every static source exists."""
    return FakeHomeFiles(files=seed_source_files(vendor_sources))


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
