from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TicketStatus(str, Enum):
    NEW = "NEW"
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


IMMUTABLE_FIELDS = ("id", "price", "destination")


@dataclass
class Ticket:
    id: str
    price: float
    destination: str
    status: TicketStatus = TicketStatus.NEW
    customer_id: Optional[str] = None

    def __setattr__(self, name, value):
        if name in IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Ticket.{name} cannot be changed once the ticket is created")
        super().__setattr__(name, value)
