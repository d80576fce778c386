"""Model layer for pywarehouse.

This module contains the warehouse dimensions, usage and storage alert
records and the inventory conversion from stored weights to category
volumes.
"""

from pywarehouse.model.inventory import (
    VOLUME_CONVERSION_FACTOR,
    CategoryShare,
    Inventory,
    InventoryRecord,
    aggregate_weights,
    category_distribution,
    load_inventory,
    oldest_batches,
    read_inventory,
    volume_to_weight,
    weights_to_volumes,
)
from pywarehouse.model.warehouse import (
    AlertLevel,
    StorageAlert,
    UsageLevel,
    WarehouseBounds,
    WarehouseUsage,
    storage_alert,
    usage_for,
)

__all__ = [
    "VOLUME_CONVERSION_FACTOR",
    "AlertLevel",
    "CategoryShare",
    "Inventory",
    "InventoryRecord",
    "StorageAlert",
    "UsageLevel",
    "WarehouseBounds",
    "WarehouseUsage",
    "aggregate_weights",
    "category_distribution",
    "load_inventory",
    "oldest_batches",
    "read_inventory",
    "storage_alert",
    "usage_for",
    "volume_to_weight",
    "weights_to_volumes",
]
