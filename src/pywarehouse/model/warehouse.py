"""Warehouse dimensions, capacity usage and storage alerts."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from pywarehouse.errors import ValidationError, validate_positive


class UsageLevel(Enum):
    """How full a warehouse is."""

    NORMAL = "normal"
    WARNING = "warning"  # 70% and above
    CRITICAL = "critical"  # 90% and above


WARNING_PERCENT = 70.0
CRITICAL_PERCENT = 90.0


class AlertLevel(Enum):
    """Severity of a storage alert, mildest first."""

    NOTICE = "notice"  # 60% and above
    WARNING = "warning"  # 75% and above
    URGENT = "urgent"  # 90% and above
    CRITICAL = "critical"  # at or over capacity


@dataclass(frozen=True)
class StorageAlert:
    """Advice shown when a warehouse is filling up.

    Attributes:
        level: Severity
        threshold: Lowest usage percentage that raises this alert
        title: Short heading
        message: One sentence describing the situation
        suggestions: Recommended actions
    """

    level: AlertLevel
    threshold: float
    title: str
    message: str
    suggestions: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "threshold": self.threshold,
            "title": self.title,
            "message": self.message,
            "suggestions": list(self.suggestions),
        }


# Checked from the highest threshold down
STORAGE_ALERTS = (
    StorageAlert(
        AlertLevel.CRITICAL,
        100.0,
        "Capacity overloaded",
        "The warehouse is over its maximum capacity. Act now:",
        (
            "Transfer stock to the central waste bank immediately",
            "Ship the material that has been stored the longest first",
            "Ask the central waste bank for an emergency pickup",
            "Stop accepting new material until space is free",
        ),
    ),
    StorageAlert(
        AlertLevel.URGENT,
        90.0,
        "Capacity critical",
        "The warehouse is close to its limit. Act soon:",
        (
            "Schedule a transfer to the central waste bank within 24 hours",
            "Review long-stored material for priority shipping",
            "Limit intake of new material",
            "Prepare routes and transport for the transfer",
        ),
    ),
    StorageAlert(
        AlertLevel.WARNING,
        75.0,
        "Capacity nearly full",
        "The warehouse is approaching its capacity. Consider:",
        (
            "Plan a transfer to the central waste bank within 3 days",
            "Review which material types can be transferred",
            "Check the upcoming pickup schedule",
        ),
    ),
    StorageAlert(
        AlertLevel.NOTICE,
        60.0,
        "Capacity moderate",
        "The warehouse is filling up. Some suggestions:",
        (
            "Start planning transfers to the central waste bank",
            "Review collection patterns to make better use of space",
            "Check material that has been stored for a long time",
        ),
    ),
)


def storage_alert(percent: float) -> StorageAlert | None:
    """Alert for a usage percentage, or None below the lowest threshold."""
    for alert in STORAGE_ALERTS:
        if percent >= alert.threshold:
            return alert
    return None


@dataclass(frozen=True)
class WarehouseBounds:
    """Interior dimensions of a warehouse in metres.

    The warehouse is an axis-aligned box centered on the origin in the
    X/Z plane and resting on Y = 0.

    Attributes:
        length: Size along the X axis
        width: Size along the Z axis
        height: Size along the Y axis
    """

    length: float = 10.0
    width: float = 10.0
    height: float = 2.0

    @property
    def capacity(self) -> float:
        """Total volume in cubic metres."""
        return self.length * self.width * self.height

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "WarehouseBounds":
        """Create bounds from a mapping with length, width and height.

        Args:
            data: Mapping with the three dimensions

        Returns:
            A new WarehouseBounds instance

        Raises:
            ValidationError: If a dimension is missing or not a positive number
        """
        values = {}
        for name in ("length", "width", "height"):
            if name not in data:
                raise ValidationError(name, None, "positive number")
            values[name] = validate_positive(data[name], name)
        return cls(**values)

    def to_dict(self) -> dict[str, float]:
        return {"length": self.length, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class WarehouseUsage:
    """Stored volume relative to capacity.

    Attributes:
        capacity: Total warehouse volume (m³)
        current_storage: Volume currently stored (m³)
    """

    capacity: float
    current_storage: float

    @property
    def percent(self) -> float:
        """Percentage of capacity in use, 0 for a warehouse without capacity."""
        if self.capacity <= 0:
            return 0.0
        return self.current_storage / self.capacity * 100

    @property
    def level(self) -> UsageLevel:
        percent = self.percent
        if percent >= CRITICAL_PERCENT:
            return UsageLevel.CRITICAL
        if percent >= WARNING_PERCENT:
            return UsageLevel.WARNING
        return UsageLevel.NORMAL

    @property
    def alert(self) -> StorageAlert | None:
        return storage_alert(self.percent)

    def to_dict(self) -> dict:
        alert = self.alert
        return {
            "capacity": self.capacity,
            "current_storage": self.current_storage,
            "percent": self.percent,
            "level": self.level.value,
            "alert": alert.to_dict() if alert else None,
        }


def usage_for(bounds: WarehouseBounds, volumes: Mapping[str, float]) -> WarehouseUsage:
    """Calculate warehouse usage from per-category volumes.

    Non-positive volumes do not count toward storage.
    """
    stored = sum(v for v in volumes.values() if v > 0)
    return WarehouseUsage(capacity=bounds.capacity, current_storage=stored)
