"""
JSON Dataset Loader.

Parses a fund document of the form ``{"dados": [{...}, ...]}`` into an
immutable FundDataset. The load succeeds or fails as a whole: a document
that cannot be read never yields a partial dataset.

Missing fields inside a record are fine (they degrade to empty values);
a missing records field yields an empty dataset.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from fund_explorer.config.models import DatasetConfig
from fund_explorer.domain.entities import FundDataset, FundRecord

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when a document cannot be turned into a dataset."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class JsonDatasetLoader:
    """Loads fund datasets from JSON text or files."""

    def __init__(self, config: Optional[DatasetConfig] = None) -> None:
        """
        Initialize loader.

        Args:
            config: Dataset configuration (records field, encoding)
        """
        self.config = config or DatasetConfig()

    def parse(self, text: str, source: Optional[str] = None) -> FundDataset:
        """
        Parse document text into a dataset.

        Args:
            text: Raw JSON document
            source: Optional label (e.g. file name) stored on the dataset

        Returns:
            FundDataset with all records

        Raises:
            LoadError: If the text is not valid JSON or not shaped as expected
        """
        try:
            document = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise LoadError(f"Invalid JSON document: {e}", cause=e) from e

        raw_records = self._extract_records(document)
        records = [
            self._build_record(position, raw)
            for position, raw in enumerate(raw_records)
        ]

        logger.info(
            f"Loaded {len(records)} records"
            + (f" from {source}" if source else "")
        )
        return FundDataset(records=tuple(records), source=source)

    def load_file(self, path: Union[str, Path]) -> FundDataset:
        """
        Read and parse a dataset file.

        Args:
            path: Path to the JSON file

        Returns:
            FundDataset with all records

        Raises:
            LoadError: If the file cannot be read or parsed
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read {file_path}: {e}", cause=e) from e
        return self.parse(text, source=file_path.name)

    def _extract_records(self, document: Any) -> List[Any]:
        """Pull the records array out of the top-level object."""
        if not isinstance(document, dict):
            logger.debug(
                f"Top-level value is {type(document).__name__}, dataset is empty"
            )
            return []

        raw_records = document.get(self.config.records_field)
        if raw_records is None:
            logger.debug(
                f"Field '{self.config.records_field}' absent, dataset is empty"
            )
            return []
        if not isinstance(raw_records, list):
            raise LoadError(
                f"Field '{self.config.records_field}' must be an array, "
                f"got {type(raw_records).__name__}"
            )
        return raw_records

    def _build_record(self, position: int, raw: Any) -> FundRecord:
        """Validate a single record object."""
        if not isinstance(raw, dict):
            raise LoadError(
                f"Record {position} must be an object, got {type(raw).__name__}"
            )
        try:
            return FundRecord.model_validate(raw)
        except ValidationError as e:
            raise LoadError(f"Record {position} is invalid: {e}", cause=e) from e


def load_records(text: str, config: Optional[DatasetConfig] = None) -> List[FundRecord]:
    """
    Convenience function to parse records from JSON text.

    Args:
        text: Raw JSON document
        config: Optional dataset configuration

    Returns:
        List of records in document order
    """
    return list(JsonDatasetLoader(config).parse(text).records)
