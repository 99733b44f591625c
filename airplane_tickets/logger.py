import logging
import os

from airplane_tickets.config import LOG_DIR, LOG_LEVEL

LOG_FILE = os.path.join(LOG_DIR, "ticket-service.log")

os.makedirs(LOG_DIR, exist_ok=True)

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    handlers=[
        logging.FileHandler(LOG_FILE),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger("ticket-service")
