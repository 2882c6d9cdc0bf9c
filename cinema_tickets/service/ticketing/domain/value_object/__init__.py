"""Ticketing Value Objects"""

from cinema_tickets.service.ticketing.domain.value_object.purchase_totals import PurchaseTotals
from cinema_tickets.service.ticketing.domain.value_object.ticket_request import TicketRequest

__all__ = ['PurchaseTotals', 'TicketRequest']
