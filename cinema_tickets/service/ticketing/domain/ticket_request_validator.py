"""
Ticket Request Validator
Purchase rules for a batch of ticket requests.

Rules are checked in a fixed order and the first failure wins:
1. the batch is present and non-empty
2. per line item, in position order: not null, category present,
   category known, count positive
3. on the summed counts: adults present when children or infants are,
   no more infants than adults, total within the maximum
"""

from collections.abc import Iterable
from typing import Any

from cinema_tickets.platform.exception.exceptions import InvalidPurchaseError
from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.domain.enum.ticket_category import TicketCategory
from cinema_tickets.service.ticketing.domain.purchase_rule import (
    PurchaseLimits,
    PurchaseRuleMessage,
)
from cinema_tickets.service.ticketing.domain.ticket_aggregator import count_tickets
from cinema_tickets.service.ticketing.domain.value_object.ticket_request import TicketRequest


class TicketRequestValidator:
    def __init__(
        self, *, max_allowed_tickets: int = PurchaseLimits.DEFAULT_MAX_ALLOWED_TICKETS
    ) -> None:
        if max_allowed_tickets < 1:
            raise ValueError('max_allowed_tickets must be at least 1')
        self.max_allowed_tickets = max_allowed_tickets

    @Logger.io
    def validate(self, ticket_requests: Iterable[TicketRequest | None] | None) -> None:
        """
        Raises:
            InvalidPurchaseError: With the message of the first rule that fails
        """
        if ticket_requests is None or not (ticket_requests := tuple(ticket_requests)):
            raise InvalidPurchaseError(PurchaseRuleMessage.EMPTY_TICKET_REQUESTS)

        for ticket_request in ticket_requests:
            self._validate_line_item(ticket_request)

        valid_requests: tuple[TicketRequest, ...] = ticket_requests  # type: ignore[assignment]
        adult_tickets = count_tickets(TicketCategory.ADULT, valid_requests)
        child_tickets = count_tickets(TicketCategory.CHILD, valid_requests)
        infant_tickets = count_tickets(TicketCategory.INFANT, valid_requests)

        self._validate_adult_present(
            adult_tickets=adult_tickets, child_tickets=child_tickets, infant_tickets=infant_tickets
        )
        self._validate_infants_within_adults(
            adult_tickets=adult_tickets, infant_tickets=infant_tickets
        )
        self._validate_max_allowed_tickets(adult_tickets + child_tickets + infant_tickets)

    @staticmethod
    def _validate_line_item(ticket_request: TicketRequest | None) -> None:
        if ticket_request is None:
            raise InvalidPurchaseError(PurchaseRuleMessage.NULL_TICKET_REQUEST)

        category: Any = ticket_request.category
        if category is None:
            raise InvalidPurchaseError(PurchaseRuleMessage.NULL_TICKET_TYPE)
        if not isinstance(category, TicketCategory):
            raise InvalidPurchaseError(PurchaseRuleMessage.UNDEFINED_TICKET_TYPE)

        count: Any = ticket_request.count
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidPurchaseError(PurchaseRuleMessage.NON_POSITIVE_TICKET_COUNT)

    @staticmethod
    def _validate_adult_present(
        *, adult_tickets: int, child_tickets: int, infant_tickets: int
    ) -> None:
        if adult_tickets == 0 and child_tickets + infant_tickets > 0:
            raise InvalidPurchaseError(PurchaseRuleMessage.NO_ADULT_TICKETS)

    @staticmethod
    def _validate_infants_within_adults(*, adult_tickets: int, infant_tickets: int) -> None:
        # Infants sit on an adult's lap
        if infant_tickets > adult_tickets:
            raise InvalidPurchaseError(PurchaseRuleMessage.MORE_INFANTS_THAN_ADULTS)

    def _validate_max_allowed_tickets(self, total_tickets: int) -> None:
        if total_tickets > self.max_allowed_tickets:
            raise InvalidPurchaseError(PurchaseRuleMessage.MAX_TICKETS_EXCEEDED)
