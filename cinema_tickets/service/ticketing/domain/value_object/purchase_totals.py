"""Purchase totals value object."""

import attrs


@attrs.define(frozen=True)
class PurchaseTotals:
    """Amount to charge and seats to reserve for an accepted purchase (Value Object)."""

    total_cost: int
    total_seats: int
