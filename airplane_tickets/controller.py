from typing import Dict, List

from airplane_tickets.exceptions import NoDestinationAvailable, NoTicketAvailable, TicketNotAssigned
from airplane_tickets.logger import logger
from airplane_tickets.logging_service import log_action
from airplane_tickets.models import Ticket, TicketStatus
from airplane_tickets.schemas import TicketResponse
from airplane_tickets.storage import DEFAULT_NUMBER_OF_TICKETS, generate_tickets


class TicketController:
    """In-memory airplane ticket inventory seeded with the default tickets."""

    def __init__(self):
        self.tickets: List[Ticket] = generate_tickets(DEFAULT_NUMBER_OF_TICKETS)
        logger.info(f"Ticket controller started with {len(self.tickets)} tickets")

    def get_tickets(self) -> List[Ticket]:
        """Return the live ticket list."""
        return self.tickets

    def get_ticket_details(self, ticket_id: str) -> Ticket:
        """Return the ticket with `ticket_id` or raise NoTicketAvailable."""
        for ticket in self.tickets:
            if ticket.id == ticket_id:
                return ticket

        logger.warning(f"Ticket {ticket_id} not found")
        raise NoTicketAvailable("No Ticket Available!")

    def buy_ticket(self, destination: str, customer_id: str):
        """Buy every NEW ticket to `destination` for `customer_id`.

        Raises NoDestinationAvailable when no ticket flies to `destination`.
        The availability flag is checked the other way round: NoTicketAvailable
        is raised when at least one ticket was bought, and the call returns
        quietly when the destination is sold out.
        """
        logger.info(f"Buy ticket request: destination={destination}, customer={customer_id}")

        exist_destination = False
        ticket_available = False
        for ticket in self.tickets:
            if ticket.destination == destination:
                exist_destination = True
                if ticket.status == TicketStatus.NEW:
                    ticket_available = True
                    ticket.customer_id = customer_id
                    ticket.status = TicketStatus.ACTIVE
                    logger.info(f"Ticket bought: {ticket}")
                    log_action(
                        action="BUY_TICKET",
                        user_id=customer_id,
                        details=TicketResponse.from_ticket(ticket).model_dump(mode="json")
                    )

        if not exist_destination:
            logger.warning(f"Destination {destination} not available")
            raise NoDestinationAvailable("No destination available.")
        if ticket_available:
            logger.warning(f"Tickets to {destination} bought by {customer_id}, reporting no ticket available")
            raise NoTicketAvailable("No ticket available.")

    def cancel_ticket(self, ticket_id: str):
        """Mark an assigned ticket as CANCELED, keeping its customer."""
        logger.info(f"Cancel ticket request: {ticket_id}")

        ticket = self.get_ticket_details(ticket_id)
        if ticket.customer_id is None:
            logger.warning(f"Ticket {ticket_id} is not assigned to any customer")
            raise TicketNotAssigned("Ticket not assigned.")

        ticket.status = TicketStatus.CANCELED

        logger.info(f"Ticket cancelled: {ticket}")
        log_action(
            action="CANCEL_TICKET",
            user_id=ticket.customer_id,
            details=TicketResponse.from_ticket(ticket).model_dump(mode="json")
        )

    def change_ticket_customer_id(self, ticket_id: str, customer_id: str):
        """Overwrite the customer of a ticket, whatever its status."""
        logger.info(f"Change customer request: {ticket_id} -> {customer_id}")

        ticket = self.get_ticket_details(ticket_id)
        ticket.customer_id = customer_id

        log_action(
            action="CHANGE_CUSTOMER",
            user_id=customer_id,
            details=TicketResponse.from_ticket(ticket).model_dump(mode="json")
        )

    def filter_tickets_by_status(self, status: TicketStatus) -> List[Ticket]:
        return [t for t in self.tickets if t.status == status]

    def group_tickets_by_customer_id(self) -> Dict[str, List[Ticket]]:
        """Group tickets under each ticket's customer id.

        Each ticket is compared with itself, so the group stored for
        tickets[i] holds every ticket from i to the end, and a later ticket of
        the same customer replaces the earlier group. A ticket without a
        customer raises AttributeError.
        """
        groups = {}
        for i in range(len(self.tickets)):
            group = []
            for j in range(i, len(self.tickets)):
                if self.tickets[j].customer_id.casefold() == self.tickets[j].customer_id.casefold():
                    group.append(self.tickets[j])
            groups[self.tickets[i].customer_id] = group
        return groups
