from collections.abc import Iterable
from typing import Any

from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.domain.account_validator import AccountValidator
from cinema_tickets.service.ticketing.domain.ticket_request_validator import (
    TicketRequestValidator,
)
from cinema_tickets.service.ticketing.domain.value_object.ticket_request import TicketRequest


class PurchaseValidator:
    """Runs the account check, then the ticket request checks. The first failure is raised."""

    def __init__(
        self,
        *,
        account_validator: AccountValidator,
        ticket_request_validator: TicketRequestValidator,
    ) -> None:
        self.account_validator = account_validator
        self.ticket_request_validator = ticket_request_validator

    @Logger.io
    def validate(
        self, account_id: Any, ticket_requests: Iterable[TicketRequest | None] | None
    ) -> None:
        self.account_validator.validate(account_id)
        self.ticket_request_validator.validate(ticket_requests)
