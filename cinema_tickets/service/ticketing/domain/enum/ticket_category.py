"""
Ticket Category Enum - Domain Value Object

Closed set of ticket categories sold at the box office. Each category has a
fixed unit price; infants sit on an adult's lap and take no seat.
"""

from enum import StrEnum


class TicketCategory(StrEnum):
    """Ticket category enumeration"""

    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'

    @property
    def unit_price(self) -> int:
        return _UNIT_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        return self is not TicketCategory.INFANT


_UNIT_PRICES: dict[TicketCategory, int] = {
    TicketCategory.ADULT: 20,
    TicketCategory.CHILD: 10,
    TicketCategory.INFANT: 0,
}
