"""
Adapters Package - Infrastructure Implementations.

Loaders:
    - JsonDatasetLoader: JSON document -> FundDataset

Clients:
    - IdentifierLookupClient: CNPJ -> canonical fund page URL

Design Principles:
    - Failures surface as one exception type per adapter
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from fund_explorer.adapters.json_loader import (
    JsonDatasetLoader,
    LoadError,
    load_records,
)
from fund_explorer.adapters.lookup_client import (
    IdentifierLookupClient,
    IdentifierLookupError,
)

__all__ = [
    "JsonDatasetLoader",
    "LoadError",
    "load_records",
    "IdentifierLookupClient",
    "IdentifierLookupError",
]
