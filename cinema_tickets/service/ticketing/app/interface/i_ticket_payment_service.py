"""
Ticket Payment Service Interface

Application layer abstraction over the payment gateway.
Use cases depend on this interface, not on a concrete gateway client.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    """
    Port (interface) for charging an account.

    The gateway is treated as always succeeding; any error it raises
    propagates to the caller unchanged.
    """

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """
        Charge the account.

        Args:
            account_id: Account to charge
            amount: Total amount to pay
        """
        pass
