"""Purchase rule limits and rejection messages."""

from typing import Final


class PurchaseLimits:
    """Ticket purchase limits."""

    DEFAULT_MAX_ALLOWED_TICKETS: Final[int] = 20


class PurchaseRuleMessage:
    """Rejection messages, in the order the rules are checked."""

    INVALID_ACCOUNT_ID: Final[str] = 'Invalid Account Id'
    EMPTY_TICKET_REQUESTS: Final[str] = 'Ticket request cannot be null or empty'
    NULL_TICKET_REQUEST: Final[str] = 'Ticket request cannot be null'
    NULL_TICKET_TYPE: Final[str] = 'Ticket type cannot be null'
    UNDEFINED_TICKET_TYPE: Final[str] = 'Ticket type not defined'
    NON_POSITIVE_TICKET_COUNT: Final[str] = 'Ticket count should be greater than 0'
    NO_ADULT_TICKETS: Final[str] = (
        'Child or infant tickets cannot be purchased without adult tickets'
    )
    MORE_INFANTS_THAN_ADULTS: Final[str] = 'Infant tickets cannot be more than adult tickets'
    MAX_TICKETS_EXCEEDED: Final[str] = 'Maximum allowed tickets exceeded'
