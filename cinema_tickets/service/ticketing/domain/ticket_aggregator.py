"""
Ticket Aggregator
Pure arithmetic over ticket requests - no validation, no side effects.
"""

from collections.abc import Iterable

from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.domain.enum.ticket_category import TicketCategory
from cinema_tickets.service.ticketing.domain.value_object.purchase_totals import PurchaseTotals
from cinema_tickets.service.ticketing.domain.value_object.ticket_request import TicketRequest


def count_tickets(category: TicketCategory, ticket_requests: Iterable[TicketRequest]) -> int:
    """Total number of tickets of one category across all line items."""
    return sum(request.count for request in ticket_requests if request.category is category)


@Logger.io
def aggregate(ticket_requests: Iterable[TicketRequest]) -> PurchaseTotals:
    """
    Compute the amount to charge and the number of seats to reserve.

    Only defined for requests that already passed the purchase rules.
    Infants are priced (at 0) but reserve no seat.
    """
    total_cost = 0
    total_seats = 0
    for request in ticket_requests:
        total_cost += request.total_price
        if request.category.occupies_seat:
            total_seats += request.count
    return PurchaseTotals(total_cost=total_cost, total_seats=total_seats)
