from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class MockTicketPaymentServiceImpl(ITicketPaymentService):
    """Stand-in for the payment gateway. Always succeeds and only logs the charge."""

    @Logger.io
    def make_payment(self, account_id: int, amount: int) -> None:
        Logger.base.info(f'[MOCK PAYMENT] Charged account {account_id}: {amount}')
