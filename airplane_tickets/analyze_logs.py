import os
import re
from collections import Counter

from airplane_tickets.config import LOG_DIR

patterns = {
    "bought": re.compile(r"BUY_TICKET"),
    "cancelled": re.compile(r"CANCEL_TICKET"),
    "reassigned": re.compile(r"CHANGE_CUSTOMER"),
    "failed": re.compile(r"\| WARNING \|"),
}


def analyze_logs(log_dir: str = LOG_DIR) -> Counter:
    """Count matching lines across every file in `log_dir`."""
    metrics = Counter()
    if not os.path.exists(log_dir):
        return metrics

    for file in sorted(os.listdir(log_dir)):
        file_path = os.path.join(log_dir, file)
        if not os.path.isfile(file_path):
            continue
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                for key, pattern in patterns.items():
                    if pattern.search(line):
                        metrics[key] += 1
    return metrics


def main():
    metrics = analyze_logs()

    print("=== Monitoring metrics ===")
    print(f"Bought tickets: {metrics['bought']}")
    print(f"Cancelled tickets: {metrics['cancelled']}")
    print(f"Reassigned tickets: {metrics['reassigned']}")
    print(f"Failed requests: {metrics['failed']}")


if __name__ == "__main__":
    main()
