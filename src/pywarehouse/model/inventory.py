"""Inventory records and their conversion to category volumes.

The layout engine only understands volumes. Stored material is recorded
by weight, so this module aggregates weight records per category and
converts them with a fixed mass to volume factor.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import NamedTuple

from pywarehouse.errors import InventoryError, ValidationError, validate_number

logger = logging.getLogger(__name__)

# Average cubic metres per kilogram across material types
VOLUME_CONVERSION_FACTOR = 0.2


@dataclass(frozen=True)
class InventoryRecord:
    """A single stored weight entry.

    Attributes:
        category: Category identifier
        weight: Weight in kilograms
        recorded_at: When the entry was recorded, if known
    """

    category: str
    weight: float
    recorded_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "InventoryRecord":
        """Create a record from a mapping with category, weight and optional date.

        Raises:
            ValidationError: If a field is missing or malformed
        """
        category = data.get("category")
        if not isinstance(category, str) or not category:
            raise ValidationError("category", category, "non-empty string")
        weight = validate_number(data.get("weight"), "weight")

        recorded_at = None
        date = data.get("date")
        if date is not None:
            try:
                recorded_at = datetime.fromisoformat(str(date))
            except ValueError as e:
                raise ValidationError("date", date, "ISO 8601 date") from e
            # Compared across records, so keep every date naive UTC
            if recorded_at.tzinfo is not None:
                recorded_at = recorded_at.astimezone(timezone.utc).replace(tzinfo=None)
        return cls(category=category, weight=weight, recorded_at=recorded_at)


def aggregate_weights(records: Iterable[InventoryRecord]) -> dict[str, float]:
    """Total weight per category, keyed in first-seen order."""
    totals: dict[str, float] = {}
    for record in records:
        totals[record.category] = totals.get(record.category, 0.0) + record.weight
    return totals


def oldest_batches(records: Iterable[InventoryRecord]) -> dict[str, datetime]:
    """Date of the oldest dated record per category.

    Categories whose records carry no date are left out.
    """
    oldest: dict[str, datetime] = {}
    for record in records:
        if record.recorded_at is None:
            continue
        current = oldest.get(record.category)
        if current is None or record.recorded_at < current:
            oldest[record.category] = record.recorded_at
    return oldest


def weights_to_volumes(
    weights: Mapping[str, float],
    factor: float = VOLUME_CONVERSION_FACTOR,
) -> dict[str, float]:
    """Convert category weights (kg) to volumes (m³)."""
    return {category: weight * factor for category, weight in weights.items()}


def volume_to_weight(volume: float, factor: float = VOLUME_CONVERSION_FACTOR) -> float:
    """Convert a volume (m³) back to weight (kg)."""
    return volume / factor


class CategoryShare(NamedTuple):
    """One row of the storage distribution."""

    category: str
    volume: float
    percent: float
    oldest: datetime | None = None


def category_distribution(
    volumes: Mapping[str, float],
    oldest: Mapping[str, datetime] | None = None,
) -> list[CategoryShare]:
    """Share of each category in the total stored volume.

    Args:
        volumes: Category name to volume
        oldest: Category name to date of its oldest batch, if known

    Returns:
        Rows largest volume first
    """
    oldest = oldest or {}
    total = sum(v for v in volumes.values() if v > 0)
    rows = [
        CategoryShare(category, volume, volume / total * 100 if total > 0 else 0.0, oldest.get(category))
        for category, volume in volumes.items()
    ]
    return sorted(rows, key=lambda row: row.volume, reverse=True)


@dataclass(frozen=True)
class Inventory:
    """Contents of an inventory file.

    Attributes:
        volumes: Category name to volume (m³), in file order
        oldest: Category name to date of its oldest batch; only dated records contribute
    """

    volumes: dict[str, float]
    oldest: dict[str, datetime] = field(default_factory=dict)


def read_inventory(path: Path, weights: bool = False, factor: float = VOLUME_CONVERSION_FACTOR) -> Inventory:
    """Read a JSON inventory file.

    The file holds either an object mapping category to a number, or a
    list of weight records (``{"category", "weight", "date"}``). Records
    are always weights; a plain object is read as volumes unless
    ``weights`` is set. Only record lists carry batch dates.

    Args:
        path: JSON file to read
        weights: Treat a plain object as weights in kilograms
        factor: Mass to volume conversion factor

    Returns:
        Volumes per category and the oldest batch dates

    Raises:
        InventoryError: If the file cannot be read or is malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise InventoryError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise InventoryError(path, f"invalid JSON: {e}") from e

    try:
        if isinstance(data, list):
            records = [InventoryRecord.from_dict(item) for item in data if isinstance(item, dict)]
            if len(records) != len(data):
                raise InventoryError(path, "every record must be an object")
            inventory = Inventory(
                volumes=weights_to_volumes(aggregate_weights(records), factor),
                oldest=oldest_batches(records),
            )
        elif isinstance(data, dict):
            values = {str(name): validate_number(value, str(name)) for name, value in data.items()}
            inventory = Inventory(volumes=weights_to_volumes(values, factor) if weights else values)
        else:
            raise InventoryError(path, "expected an object or a list of records")
    except ValidationError as e:
        raise InventoryError(path, str(e)) from e

    logger.debug(f"Loaded {len(inventory.volumes)} categories from {path}")
    return inventory


def load_inventory(path: Path, weights: bool = False, factor: float = VOLUME_CONVERSION_FACTOR) -> dict[str, float]:
    """Load only the category volumes (m³) from a JSON inventory file.

    Raises:
        InventoryError: If the file cannot be read or is malformed
    """
    return read_inventory(path, weights, factor).volumes
