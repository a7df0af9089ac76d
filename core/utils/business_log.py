"""
Business event logging - one INFO line per domain event on the `business` logger.
"""

import json
import logging

logger = logging.getLogger("business")


def log_business(event: str, **fields) -> None:
    """Emit `event | {json fields}`; fields must be JSON-friendly or str()-able."""
    payload = json.dumps(fields, ensure_ascii=False, default=str, sort_keys=True)
    logger.info(f"{event} | {payload}")
