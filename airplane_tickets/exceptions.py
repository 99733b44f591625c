class TicketError(Exception):
    """Base class for ticket controller errors."""


class NoTicketAvailable(TicketError):
    """No ticket with the requested id, or the purchase outcome of buy_ticket."""


class NoDestinationAvailable(TicketError):
    """The destination is not served by any ticket."""


class TicketNotAssigned(TicketError):
    """The ticket has no customer assigned."""
