"""Base utilities for data sources."""

import logging
from abc import ABC
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..exceptions import NoDataError, TransportError
from .utils import ApiSession

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class BaseSource(ABC):
    """Base class for API-backed series sources.

    Subclasses build URLs and map raw API items onto schema records; this
    class owns the request, the ``data`` envelope and the record loop.
    """

    name = "source"

    def __init__(self, base_url: str, session: ApiSession | None = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or ApiSession()
        self.stats = {"processed": 0, "errors": 0, "skipped": 0}
        self.logger = logging.getLogger(self.__class__.__name__)

    def close(self) -> None:
        self.session.close()

    def get_json(self, url: str, params: dict[str, Any] | None = None) -> list[dict]:
        """GET ``url`` and return the ``data`` list of the response body."""
        try:
            response = self.session.get(url, params=params)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {e}")
            raise TransportError(self.name, f"request to {url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON from {url}: {e}")
            raise TransportError(self.name, f"invalid JSON from {url}") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not data:
            raise NoDataError(self.name, "Data not found in the response")
        if not isinstance(data, list):
            raise NoDataError(self.name, f"Unexpected data payload: {type(data).__name__}")
        return data

    def transform_all(
        self,
        items: Iterable[dict[str, Any]],
        transform: Callable[[dict[str, Any]], RecordT | None],
    ) -> list[RecordT]:
        """Map raw items onto records, skipping items that do not validate."""
        records = []
        skipped = errors = 0
        for item in items:
            try:
                record = transform(item)
            except (ValidationError, ValueError, KeyError, TypeError) as e:
                self.logger.debug(f"Validation error: {e}")
                errors += 1
                continue
            if record is None:
                skipped += 1
                continue
            records.append(record)

        self.stats["processed"] += len(records)
        self.stats["skipped"] += skipped
        self.stats["errors"] += errors

        self.logger.info(
            f"{self.name}: {len(records)} records "
            f"({skipped} skipped, {errors} invalid)"
        )
        return records
