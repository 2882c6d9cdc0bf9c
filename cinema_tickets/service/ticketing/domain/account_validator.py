from typing import Any

from cinema_tickets.platform.exception.exceptions import InvalidPurchaseError
from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.domain.purchase_rule import PurchaseRuleMessage


class AccountValidator:
    """Account checks made before a purchase. Only the account id is checked today."""

    @Logger.io
    def validate(self, account_id: Any) -> None:
        """
        Raises:
            InvalidPurchaseError: If account_id is missing, not an integer, or not positive
        """
        if (
            account_id is None
            or isinstance(account_id, bool)
            or not isinstance(account_id, int)
            or account_id <= 0
        ):
            raise InvalidPurchaseError(PurchaseRuleMessage.INVALID_ACCOUNT_ID)
