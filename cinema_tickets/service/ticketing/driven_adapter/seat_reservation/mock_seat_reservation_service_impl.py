from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class MockSeatReservationServiceImpl(ISeatReservationService):
    """Stand-in for the seat booking system. Always succeeds and only logs the reservation."""

    @Logger.io
    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        Logger.base.info(f'[MOCK SEAT] Reserved {seat_count} seats for account {account_id}')
