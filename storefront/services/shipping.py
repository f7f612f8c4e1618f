"""
Shipping Service

Groups shippable units by product name and writes the shipment notice.
"""

import logging
from typing import Iterable, Optional

from ..core.config import settings
from ..core.output import OutputSink, format_amount, format_grams
from ..models.checkout import ShipmentLine, ShipmentSummary
from ..models.product import Shippable

logger = logging.getLogger(__name__)

_INT_MASK = 0xFFFFFFFF


def string_hash(name: str) -> int:
    """32-bit polynomial hash over UTF-16 code units, as an unsigned int"""
    encoded = name.encode("utf-16-be")
    h = 0
    for i in range(0, len(encoded), 2):
        h = (31 * h + int.from_bytes(encoded[i:i + 2], "big")) & _INT_MASK
    return h


def hash_table_order(names: list[str]) -> list[str]:
    """
    Order names the way historical notices listed them.

    Groups were iterated by bucket of a power-of-two hash table (16 buckets,
    doubled while more than three quarters full), and by insertion order
    within a bucket.
    """
    capacity = 16
    while len(names) > capacity * 3 // 4:
        capacity *= 2

    def bucket(name: str) -> int:
        h = string_hash(name)
        return (h ^ (h >> 16)) & (capacity - 1)

    # sorted() is stable, so ties keep insertion order
    return sorted(names, key=bucket)


class ShippingService:
    """
    Builds shipment notices.

    Notices have always weighed each group as the first unit's weight times
    the group count, which is wrong whenever the package mixes products.
    ``use_first_item_weight=False`` weighs each group by its own unit weight.
    The package total is the true sum in either mode.

    Groups are listed in hash table order by default, matching historical
    notices; ``legacy_group_order=False`` lists them in cart order.
    """

    def __init__(
        self,
        sink: OutputSink,
        use_first_item_weight: Optional[bool] = None,
        legacy_group_order: Optional[bool] = None,
    ):
        self.sink = sink
        if use_first_item_weight is None:
            use_first_item_weight = settings.use_first_item_weight
        if legacy_group_order is None:
            legacy_group_order = settings.legacy_group_order
        self.use_first_item_weight = use_first_item_weight
        self.legacy_group_order = legacy_group_order

    def summarize(self, items: Iterable[Shippable]) -> Optional[ShipmentSummary]:
        """
        Group units by name.

        Returns:
            None when there is nothing to ship
        """
        units = list(items)
        if not units:
            return None

        counts: dict[str, int] = {}
        unit_weights: dict[str, float] = {}
        total_weight = 0.0
        for unit in units:
            total_weight += unit.weight
            counts[unit.name] = counts.get(unit.name, 0) + 1
            unit_weights.setdefault(unit.name, unit.weight)

        names = list(counts)
        if self.legacy_group_order:
            names = hash_table_order(names)

        first_weight = units[0].weight
        lines = [
            ShipmentLine(
                name=name,
                count=counts[name],
                weight=(first_weight if self.use_first_item_weight else unit_weights[name]) * counts[name],
            )
            for name in names
        ]
        return ShipmentSummary(lines=lines, total_weight_grams=total_weight)

    def ship(self, items: Iterable[Shippable]) -> Optional[ShipmentSummary]:
        """Write the shipment notice; nothing is written for an empty package"""
        summary = self.summarize(items)
        if summary is None:
            return None

        self.sink.write_line("** Shipment notice **")
        for line in summary.lines:
            self.sink.write_line(f"{line.count}x {line.name} {format_grams(line.weight)}g")
        self.sink.write_line(f"Total package weight {format_amount(summary.total_weight_kg)}kg")

        logger.info(
            f"Shipped {sum(line.count for line in summary.lines)} units "
            f"in {len(summary.lines)} groups, {summary.total_weight_grams}g"
        )
        return summary
