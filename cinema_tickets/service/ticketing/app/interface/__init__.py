"""Ticketing Interfaces"""

from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)

__all__ = [
    'ISeatReservationService',
    'ITicketPaymentService',
]
