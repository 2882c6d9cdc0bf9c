"""Ticketing Domain Enums"""

from cinema_tickets.service.ticketing.domain.enum.ticket_category import TicketCategory

__all__ = ['TicketCategory']
