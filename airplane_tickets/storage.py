from typing import List

from airplane_tickets.models import Ticket, TicketStatus

DEFAULT_NUMBER_OF_TICKETS = 10


def generate_tickets(count: int = DEFAULT_NUMBER_OF_TICKETS) -> List[Ticket]:
    """Seed tickets: 3 to Cluj-Napoca, 3 to Baia Mare, the rest to Timisoara."""
    tickets = []
    for i in range(count):
        if i < 3:
            destination, price = "Cluj-Napoca", 10.0
        elif i < 6:
            destination, price = "Baia Mare", 20.0
        else:
            destination, price = "Timisoara", 15.0

        tickets.append(Ticket(id=f"ID-{i}", price=price, destination=destination, status=TicketStatus.NEW))
    return tickets
