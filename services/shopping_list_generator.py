"""
Ingredient aggregation for shopping list generation.

Turns meal plan entries into a flat list of shopping items: every recipe
ingredient line is scaled by its entry's ``servings_to_prepare`` and lines
sharing an aggregation key are summed.

Merge policy:
- key is ``(ingredient name lower-cased, unit name as stored)``; units are
  never converted or case-folded, so "Cup" and "cup" stay separate items
- the item keeps the name spelling of the first line seen for the key
- notes come from the last contributing line (earlier notes are dropped)
- items are ordered by first appearance of their key

All arithmetic is done on ``Decimal``; inputs are coerced through ``str`` so
float-typed quantities do not bring binary rounding error with them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from app.exceptions import ServiceValidationError

logger = logging.getLogger("flavourly.shopping.generator")


class IngredientLine(Protocol):
    ingredient_name: str
    unit_name: str
    quantity: Decimal
    notes: Optional[str]


class PlannedRecipe(Protocol):
    servings_to_prepare: int
    lines: Sequence[IngredientLine]


@dataclass(frozen=True)
class AggregationKey:
    """Composite key two ingredient lines must share to be merged."""

    ingredient_name: str
    unit_name: str

    @classmethod
    def for_line(cls, ingredient_name: str, unit_name: str) -> "AggregationKey":
        return cls(ingredient_name.lower(), unit_name)


@dataclass
class AggregatedItem:
    item_name: str
    quantity: Decimal
    unit: Optional[str]
    notes: Optional[str]
    sort_order: int = 0


@dataclass
class PlannedLines:
    """Adapter pairing a scale factor with the lines it applies to."""

    servings_to_prepare: int
    lines: Sequence[IngredientLine]


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ServiceValidationError(f"Invalid quantity: {value!r}")


def _scale_factor(servings) -> int:
    if isinstance(servings, bool) or not isinstance(servings, int) or servings < 1:
        raise ServiceValidationError(
            f"servings_to_prepare must be a positive integer, got {servings!r}"
        )
    return servings


def aggregate_ingredients(entries: Iterable[PlannedRecipe]) -> List[AggregatedItem]:
    """
    Scale and merge the ingredient lines of every planned recipe.

    Args:
        entries: planned recipes in the order they should be visited; each
            exposes ``servings_to_prepare`` and ``lines``

    Returns:
        Aggregated items in first-seen key order with ``sort_order`` set to
        their position (0-based)

    Raises:
        ServiceValidationError: non-positive scale factor or negative quantity
    """
    merged: Dict[AggregationKey, AggregatedItem] = {}

    for entry in entries:
        servings = _scale_factor(entry.servings_to_prepare)
        for line in entry.lines:
            quantity = to_decimal(line.quantity)
            if quantity < 0:
                raise ServiceValidationError(
                    f"Negative quantity for ingredient '{line.ingredient_name}'"
                )
            scaled = quantity * servings
            key = AggregationKey.for_line(line.ingredient_name, line.unit_name)

            existing = merged.get(key)
            if existing is None:
                merged[key] = AggregatedItem(
                    item_name=line.ingredient_name,
                    quantity=scaled,
                    unit=line.unit_name,
                    notes=line.notes,
                )
                continue

            existing.quantity += scaled
            if existing.notes and existing.notes != line.notes:
                logger.debug(
                    "Notes for %s (%s) replaced: %r -> %r",
                    existing.item_name,
                    key.unit_name,
                    existing.notes,
                    line.notes,
                )
            existing.notes = line.notes

    items = list(merged.values())
    for index, item in enumerate(items):
        item.sort_order = index
    return items
