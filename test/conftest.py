"""
Test Configuration and Fixtures

This module provides:
- Test environment setup (log directory, service context)
- DI container fixture with automatic override/singleton reset
- Loguru sink fixture for asserting on log output
- Port mocks that record call order across both external services
"""

# =============================================================================
# Environment setup MUST happen before any application import
# Settings and the loguru handlers are created at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'cinema-tickets')
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from cinema_tickets.platform.config.di import Container, cleanup, container  # noqa: E402
from cinema_tickets.platform.logging.loguru_io import Logger  # noqa: E402
from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (  # noqa: E402
    ISeatReservationService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (  # noqa: E402
    ITicketPaymentService,
)


@pytest.fixture
def di_container() -> Generator[Container, None, None]:
    """Application container; overrides and singletons are reset after each test"""
    yield container
    cleanup()


@pytest.fixture
def log_records() -> Generator[list[dict[str, Any]], None, None]:
    """Collect loguru records emitted during the test"""
    records: list[dict[str, Any]] = []
    handler_id = Logger.base.add(lambda message: records.append(message.record), level='DEBUG')
    yield records
    Logger.base.remove(handler_id)


@pytest.fixture
def external_services() -> Mock:
    """
    Parent mock holding both ports, so `mock_calls` shows the order
    in which the services were called.
    """
    manager = Mock()
    manager.attach_mock(Mock(spec=ISeatReservationService), 'seat_reservation_service')
    manager.attach_mock(Mock(spec=ITicketPaymentService), 'ticket_payment_service')
    return manager


@pytest.fixture
def mock_seat_reservation_service(external_services: Mock) -> Mock:
    return external_services.seat_reservation_service


@pytest.fixture
def mock_ticket_payment_service(external_services: Mock) -> Mock:
    return external_services.ticket_payment_service
