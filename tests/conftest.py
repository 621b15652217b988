"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any, Callable, List

import pytest

from fund_explorer.adapters.json_loader import JsonDatasetLoader
from fund_explorer.config.models import ExplorerConfig, PaginationConfig
from fund_explorer.domain.entities import FundRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding fixture files."""
    return FIXTURES_DIR


@pytest.fixture
def sample_funds_path() -> Path:
    """Path to the 12-record sample dataset."""
    return FIXTURES_DIR / "sample_funds.json"


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return FIXTURES_DIR / "sample_config.yaml"


@pytest.fixture
def sample_records(sample_funds_path: Path) -> List[FundRecord]:
    """Records of the sample dataset, in file order."""
    return list(JsonDatasetLoader().load_file(sample_funds_path).records)


@pytest.fixture
def default_config() -> ExplorerConfig:
    """Create default explorer configuration."""
    return ExplorerConfig()


@pytest.fixture
def pagination_config() -> PaginationConfig:
    """Create default pagination configuration."""
    return PaginationConfig()


@pytest.fixture
def make_record() -> Callable[..., FundRecord]:
    """
    Factory for records built from dataset keys.

    Example:
        make_record(nome="Fundo A", risco="alto", **{"12_meses": "1,0%"})
    """

    def _make(**fields: Any) -> FundRecord:
        return FundRecord.model_validate(fields)

    return _make
