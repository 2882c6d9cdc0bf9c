from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class TicketPurchaseDispatcher:
    """
    Hands an accepted purchase to the external services.

    Seats are reserved first, then payment is taken. Each service is called
    exactly once; nothing is retried or compensated if the second call fails.
    """

    def __init__(
        self,
        *,
        seat_reservation_service: ISeatReservationService,
        ticket_payment_service: ITicketPaymentService,
    ) -> None:
        self.seat_reservation_service = seat_reservation_service
        self.ticket_payment_service = ticket_payment_service

    @Logger.io
    def dispatch(self, account_id: int, total_cost: int, total_seats: int) -> None:
        self.seat_reservation_service.reserve_seats(account_id, total_seats)
        self.ticket_payment_service.make_payment(account_id, total_cost)
