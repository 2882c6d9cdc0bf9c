"""
Seat Reservation Service Interface

Application layer abstraction over the seat booking system.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    """Port (interface) for reserving seats. Availability is not checked."""

    @abstractmethod
    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        """
        Reserve seats for the account.

        Args:
            account_id: Account the seats are reserved for
            seat_count: Number of seats to reserve
        """
        pass
