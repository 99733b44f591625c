from typing import Optional

from pydantic import BaseModel, ConfigDict

from airplane_tickets.models import Ticket, TicketStatus


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    price: float
    destination: str
    status: TicketStatus
    customer_id: Optional[str] = None

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketResponse":
        return cls.model_validate(ticket)
