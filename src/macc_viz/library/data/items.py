"""Chart item containers."""

from __future__ import annotations

from attrs import define, evolve, field

PLACEHOLDER_LABEL = "—"


@define(frozen=True)
class ChartItem:
    """One abatement action on the curve.

    Attributes
    ----------
    label
        Action identifier, ``"—"`` when the row had none
    quantity
        Abatement amount, always finite and strictly positive
    cost
        Marginal cost per unit of abatement, may be negative
    group
        Optional category. Carried through but not used for layout or colour.
    range_start, range_end
        Cumulative abatement interval ``[range_start, range_end)``, unset
        until the items have been accumulated
    """

    label: str
    quantity: float
    cost: float
    group: str | None = None
    range_start: float | None = field(default=None, kw_only=True)
    range_end: float | None = field(default=None, kw_only=True)

    @property
    def is_accumulated(self) -> bool:
        return self.range_start is not None and self.range_end is not None

    def with_range(self, start: float, end: float) -> ChartItem:
        """Return a copy placed at ``[start, end)`` on the abatement axis."""
        return evolve(self, range_start=start, range_end=end)


@define(frozen=True)
class AccumulatedItems:
    """Items in curve order together with the domains they span.

    Attributes
    ----------
    items
        Items sorted by ascending cost with cumulative ranges set
    total_quantity
        Sum of all quantities, equal to the last item's ``range_end``
    min_cost, max_cost
        Cost domain, always including zero
    """

    items: tuple[ChartItem, ...]
    total_quantity: float
    min_cost: float
    max_cost: float

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
