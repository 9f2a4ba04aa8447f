"""Pytest configuration shared by all tests"""

import sys
from pathlib import Path

import pytest
import yaml

# Add project root to path for hunt imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hunt.config import reset_config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def default_config():
    """
    Every test starts and ends with the default process-wide configuration.

    configure() swaps a module-level default; tests that call it must not
    leak stopwords or transliteration options into other tests.
    """
    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="session")
def data_samples():
    """Sample texts for transliteration tests (tests/fixtures/data_samples.yml)"""
    with open(FIXTURES_DIR / "data_samples.yml", encoding="utf-8") as f:
        return yaml.safe_load(f)
