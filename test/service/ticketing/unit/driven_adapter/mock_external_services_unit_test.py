from typing import Any

from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from cinema_tickets.service.ticketing.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from cinema_tickets.service.ticketing.driven_adapter.seat_reservation.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


def _info_messages(log_records: list[dict[str, Any]]) -> list[str]:
    return [record['message'] for record in log_records if record['level'].name == 'INFO']


def test_mock_payment_service_implements_port(log_records: list[dict[str, Any]]) -> None:
    service = MockTicketPaymentServiceImpl()

    assert isinstance(service, ITicketPaymentService)
    assert service.make_payment(1, 60) is None
    assert _info_messages(log_records) == ['[MOCK PAYMENT] Charged account 1: 60']


def test_mock_seat_reservation_service_implements_port(log_records: list[dict[str, Any]]) -> None:
    service = MockSeatReservationServiceImpl()

    assert isinstance(service, ISeatReservationService)
    assert service.reserve_seats(1, 3) is None
    assert _info_messages(log_records) == ['[MOCK SEAT] Reserved 3 seats for account 1']
