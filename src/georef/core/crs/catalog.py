"""
CRS catalog.

Holds the list of known coordinate reference systems. The list is read once,
on first access, from an optional JSON file and falls back to the
compiled-in table when that file is missing or unusable. Lookups run against
an immutable snapshot that ``reload()`` swaps atomically, so readers never
need the lock.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from georef.core.config import settings
from georef.core.crs.builtin import builtin_records
from georef.core.errors import CatalogError, ConfigurationError
from georef.models.crs import CrsRecord
from georef.utils.logging import PerformanceTimer

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(List[CrsRecord])


class _Snapshot(NamedTuple):
    records: Tuple[CrsRecord, ...]
    by_code: Dict[str, CrsRecord]
    by_epsg: Dict[int, CrsRecord]
    source: str


def _build_snapshot(records: List[CrsRecord], source: str) -> _Snapshot:
    by_code: Dict[str, CrsRecord] = {}
    by_epsg: Dict[int, CrsRecord] = {}
    for record in records:
        by_code.setdefault(record.code.upper(), record)
        if record.epsg > 0:
            by_epsg.setdefault(record.epsg, record)
    return _Snapshot(tuple(records), by_code, by_epsg, source)


def load_catalog_file(path: Union[str, Path]) -> List[CrsRecord]:
    """
    Read a JSON catalog file.

    The file must hold a JSON array of records. Field names are matched
    case-insensitively and flat ``MinX``/``MaxX``/``MinY``/``MaxY`` keys are
    folded into ``bounds``.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed records, in file order

    Raises:
        CatalogError: If the file cannot be read, is not valid JSON, does not
            validate, or holds no records
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file: {e}", file_path=str(path))

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogError(
            f"Catalog file is not valid JSON: {e.msg}",
            file_path=str(path),
            details={"line": e.lineno, "column": e.colno},
        )

    try:
        records = _RECORD_LIST.validate_python(data)
    except PydanticValidationError as e:
        raise CatalogError(
            f"Catalog file has invalid records ({e.error_count()} errors)",
            file_path=str(path),
            details={"errors": [err["msg"] for err in e.errors()]},
        )

    if not records:
        raise CatalogError("Catalog file holds no records", file_path=str(path))

    return records


class CrsCatalog:
    """
    Registry of known CRSs.

    Construction does no I/O; the first access to ``records`` (or any
    lookup) loads the data. Safe to share between threads.

    Example:
        >>> catalog = CrsCatalog()
        >>> catalog.get_by_epsg(2154).code
        'RGF93.LAMB93'
    """

    def __init__(self, data_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize the catalog.

        Args:
            data_path: Optional JSON catalog file. Defaults to
                ``settings.catalog_path``.
        """
        if data_path is None:
            data_path = settings.catalog_path
        self.data_path: Optional[Path] = Path(data_path) if data_path is not None else None
        self._lock = threading.Lock()
        self._snapshot: Optional[_Snapshot] = None

    def _read_records(self) -> Tuple[List[CrsRecord], str]:
        path = self.data_path
        if path is not None:
            if path.is_dir():
                raise ConfigurationError(
                    f"Catalog path is a directory: {path}", config_key="catalog_path"
                )
            if path.is_file():
                try:
                    return load_catalog_file(path), str(path)
                except CatalogError as e:
                    logger.warning(
                        f"Falling back to built-in CRS catalog: {e.message}",
                        extra={"error_code": e.error_code, "file_path": str(path)},
                    )
            else:
                logger.info(f"Catalog file {path} not found, using built-in CRS catalog")

        return builtin_records(), "builtin"

    def _load_snapshot(self) -> _Snapshot:
        with PerformanceTimer("crs_catalog_load") as timer:
            records, source = self._read_records()
            snapshot = _build_snapshot(records, source)
        logger.info(
            f"Loaded {len(snapshot.records)} CRS records from {source}",
            extra={"record_count": len(snapshot.records), "duration_ms": timer.duration_ms},
        )
        return snapshot

    def load(self) -> None:
        """
        Populate the catalog if it has not been populated yet.

        Idempotent. Concurrent first callers populate it exactly once.

        Raises:
            ConfigurationError: If the configured catalog path is a directory
        """
        self._current()

    def reload(self) -> None:
        """
        Re-read the catalog and swap in the new snapshot.

        Tuples already handed out by ``records`` stay valid and unchanged.
        """
        with self._lock:
            self._snapshot = self._load_snapshot()

    def _current(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            snapshot = self._snapshot
            if snapshot is None:
                snapshot = self._load_snapshot()
                self._snapshot = snapshot
            return snapshot

    @property
    def records(self) -> Tuple[CrsRecord, ...]:
        """Current immutable list of records."""
        return self._current().records

    @property
    def source(self) -> str:
        """Where the current records came from: a file path or "builtin"."""
        return self._current().source

    def get_by_code(self, code: Optional[str]) -> Optional[CrsRecord]:
        """
        Find a record by code, ignoring case.

        Returns:
            The record, or None for a blank or unknown code
        """
        if not code or not code.strip():
            return None
        return self._current().by_code.get(code.strip().upper())

    def get_by_epsg(self, epsg: int) -> Optional[CrsRecord]:
        """
        Find a record by EPSG id.

        Returns:
            The record, or None when ``epsg <= 0`` or unknown
        """
        if epsg <= 0:
            return None
        return self._current().by_epsg.get(epsg)

    def search(self, text: Optional[str]) -> Iterator[CrsRecord]:
        """
        Search records by case-insensitive substring.

        Matches code, name, country, region, description and EPSG id. Blank
        text yields every record.

        Args:
            text: Text to look for

        Yields:
            Matching records in catalog order
        """
        records = self.records
        needle = (text or "").strip().lower()
        if not needle:
            yield from records
            return

        for record in records:
            haystack = (
                record.code,
                record.name,
                record.country,
                record.region,
                record.description,
                str(record.epsg),
            )
            if any(needle in field.lower() for field in haystack):
                yield record

    def group_by_country(self) -> Dict[str, List[CrsRecord]]:
        """
        Group records by country.

        Returns:
            Mapping of country to its records, keys in sorted order
        """
        groups: Dict[str, List[CrsRecord]] = {}
        for record in self.records:
            groups.setdefault(record.country, []).append(record)
        return {country: groups[country] for country in sorted(groups)}

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CrsRecord]:
        return iter(self.records)
