"""Ticket request value object."""

import attrs

from cinema_tickets.service.ticketing.domain.enum.ticket_category import TicketCategory


@attrs.define(frozen=True)
class TicketRequest:
    """
    One line item of a purchase: a ticket category and how many of it (Value Object).

    No validation on construction. Malformed requests (missing category,
    non-positive count) are rejected by the purchase rules.
    """

    category: TicketCategory
    count: int

    @property
    def unit_price(self) -> int:
        return self.category.unit_price

    @property
    def total_price(self) -> int:
        return self.unit_price * self.count
