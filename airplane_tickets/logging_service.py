import json
from datetime import datetime
from pathlib import Path

from airplane_tickets.config import LOG_DIR
from airplane_tickets.logger import logger

LOG_FILE = Path(LOG_DIR) / "user_actions.log"


def log_action(action: str, user_id: str, details: dict = None, ip: str = None):
    """Append a user action to the action log as one JSON line."""
    log_entry = {
        "timestamp": datetime.now().isoformat(),
        "action": action,
        "user_id": user_id,
        "ip": ip,
        "details": details or {}
    }

    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
    except OSError as e:
        logger.error(f"Failed to write action log: {e}")


def get_logs(limit: int = 100) -> list:
    """Return the last `limit` entries of the action log."""
    if not LOG_FILE.exists():
        return []

    with open(LOG_FILE, "r", encoding="utf-8") as f:
        lines = f.readlines()

    logs = []
    for line in lines[-limit:]:
        try:
            logs.append(json.loads(line))
        except json.JSONDecodeError:
            logger.warning(f"Skipping malformed action log line: {line.strip()}")

    return logs
