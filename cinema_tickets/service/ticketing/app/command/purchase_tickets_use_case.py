from typing import Any

from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.ticket_purchase_dispatcher import (
    TicketPurchaseDispatcher,
)
from cinema_tickets.service.ticketing.domain.purchase_validator import PurchaseValidator
from cinema_tickets.service.ticketing.domain.ticket_aggregator import aggregate
from cinema_tickets.service.ticketing.domain.value_object.ticket_request import TicketRequest


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case

    Flow:
    1. Validate account and ticket requests (Fail Fast - no external calls on rejection)
    2. Aggregate total cost and seats to reserve
    3. Reserve seats, then take payment

    Dependencies:
    - purchase_validator: purchase rules
    - ticket_purchase_dispatcher: calls seat reservation and payment services
    """

    def __init__(
        self,
        *,
        purchase_validator: PurchaseValidator,
        ticket_purchase_dispatcher: TicketPurchaseDispatcher,
    ) -> None:
        self.purchase_validator = purchase_validator
        self.ticket_purchase_dispatcher = ticket_purchase_dispatcher

    @Logger.io
    def purchase_tickets(self, account_id: Any, *ticket_requests: TicketRequest | None) -> None:
        """
        Purchase a batch of tickets for an account.

        Args:
            account_id: Positive account identifier
            ticket_requests: Line items, same category may appear more than once

        Raises:
            InvalidPurchaseError: If any purchase rule fails; neither service is called
        """
        self.purchase_validator.validate(account_id, ticket_requests)

        totals = aggregate(ticket_requests)
        Logger.base.info(
            f'[PURCHASE] account {account_id}: reserving {totals.total_seats} seats, '
            f'charging {totals.total_cost}'
        )

        self.ticket_purchase_dispatcher.dispatch(
            account_id, totals.total_cost, totals.total_seats
        )
