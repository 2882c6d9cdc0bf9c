"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from cinema_tickets.platform.config.core_setting import Settings
from cinema_tickets.service.ticketing.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from cinema_tickets.service.ticketing.app.ticket_purchase_dispatcher import (
    TicketPurchaseDispatcher,
)
from cinema_tickets.service.ticketing.domain.account_validator import AccountValidator
from cinema_tickets.service.ticketing.domain.purchase_validator import PurchaseValidator
from cinema_tickets.service.ticketing.domain.ticket_request_validator import (
    TicketRequestValidator,
)
from cinema_tickets.service.ticketing.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from cinema_tickets.service.ticketing.driven_adapter.seat_reservation.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # External services (third-party gateway stand-ins)
    ticket_payment_service = providers.Singleton(MockTicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(MockSeatReservationServiceImpl)

    # Purchase rules (stateless)
    account_validator = providers.Singleton(AccountValidator)
    ticket_request_validator = providers.Singleton(
        TicketRequestValidator,
        max_allowed_tickets=config_service.provided.MAX_ALLOWED_TICKETS,
    )
    purchase_validator = providers.Singleton(
        PurchaseValidator,
        account_validator=account_validator,
        ticket_request_validator=ticket_request_validator,
    )

    ticket_purchase_dispatcher = providers.Singleton(
        TicketPurchaseDispatcher,
        seat_reservation_service=seat_reservation_service,
        ticket_payment_service=ticket_payment_service,
    )

    # Use cases (stateless, can be Singleton)
    purchase_tickets_use_case = providers.Singleton(
        PurchaseTicketsUseCase,
        purchase_validator=purchase_validator,
        ticket_purchase_dispatcher=ticket_purchase_dispatcher,
    )


container = Container()


def cleanup() -> None:
    container.reset_override()
    container.reset_singletons()
