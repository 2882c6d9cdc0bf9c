import pytest

from cinema_tickets.service.ticketing.domain.enum.ticket_category import TicketCategory
from cinema_tickets.service.ticketing.domain.ticket_aggregator import aggregate, count_tickets
from cinema_tickets.service.ticketing.domain.value_object.purchase_totals import PurchaseTotals
from cinema_tickets.service.ticketing.domain.value_object.ticket_request import TicketRequest


ADULT = TicketCategory.ADULT
CHILD = TicketCategory.CHILD
INFANT = TicketCategory.INFANT


class TestCountTickets:
    def test_sums_same_category_across_line_items(self) -> None:
        ticket_requests = [
            TicketRequest(ADULT, 2),
            TicketRequest(CHILD, 4),
            TicketRequest(ADULT, 3),
        ]

        assert count_tickets(ADULT, ticket_requests) == 5
        assert count_tickets(CHILD, ticket_requests) == 4

    def test_missing_category_counts_zero(self) -> None:
        assert count_tickets(INFANT, [TicketRequest(ADULT, 2)]) == 0


class TestAggregate:
    @pytest.mark.parametrize(
        'ticket_requests,expected_cost,expected_seats',
        [
            ([TicketRequest(ADULT, 3)], 60, 3),
            ([TicketRequest(ADULT, 6), TicketRequest(CHILD, 5), TicketRequest(INFANT, 2)], 170, 11),
            (
                [TicketRequest(ADULT, 10), TicketRequest(CHILD, 6), TicketRequest(INFANT, 4)],
                260,
                16,
            ),
            ([TicketRequest(ADULT, 20)], 400, 20),
            ([TicketRequest(ADULT, 1), TicketRequest(CHILD, 1), TicketRequest(INFANT, 1)], 30, 2),
        ],
    )
    def test_totals(
        self, ticket_requests: list[TicketRequest], expected_cost: int, expected_seats: int
    ) -> None:
        assert aggregate(ticket_requests) == PurchaseTotals(
            total_cost=expected_cost, total_seats=expected_seats
        )

    def test_infants_cost_nothing_and_take_no_seat(self) -> None:
        without_infants = aggregate([TicketRequest(ADULT, 4), TicketRequest(CHILD, 2)])
        with_infants = aggregate(
            [TicketRequest(ADULT, 4), TicketRequest(CHILD, 2), TicketRequest(INFANT, 4)]
        )

        assert with_infants == without_infants

    def test_split_line_items_equal_single_line_item(self) -> None:
        split = aggregate(
            [TicketRequest(ADULT, 2), TicketRequest(ADULT, 2), TicketRequest(CHILD, 1)]
        )
        merged = aggregate([TicketRequest(ADULT, 4), TicketRequest(CHILD, 1)])

        assert split == merged == PurchaseTotals(total_cost=90, total_seats=5)

    def test_order_of_line_items_does_not_matter(self) -> None:
        ticket_requests = [
            TicketRequest(INFANT, 1),
            TicketRequest(CHILD, 3),
            TicketRequest(ADULT, 2),
        ]

        assert aggregate(ticket_requests) == aggregate(list(reversed(ticket_requests)))
