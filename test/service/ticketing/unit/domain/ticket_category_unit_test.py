import pytest

from cinema_tickets.service.ticketing.domain.enum.ticket_category import TicketCategory


class TestTicketCategory:
    def test_categories_are_a_closed_set(self) -> None:
        assert [category.name for category in TicketCategory] == ['ADULT', 'CHILD', 'INFANT']

    @pytest.mark.parametrize(
        'category,expected_price',
        [
            (TicketCategory.ADULT, 20),
            (TicketCategory.CHILD, 10),
            (TicketCategory.INFANT, 0),
        ],
    )
    def test_unit_price(self, category: TicketCategory, expected_price: int) -> None:
        assert category.unit_price == expected_price

    def test_only_infants_do_not_occupy_a_seat(self) -> None:
        assert TicketCategory.ADULT.occupies_seat is True
        assert TicketCategory.CHILD.occupies_seat is True
        assert TicketCategory.INFANT.occupies_seat is False

    def test_lookup_by_value(self) -> None:
        assert TicketCategory('adult') is TicketCategory.ADULT

    def test_unknown_value_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            TicketCategory('senior')
