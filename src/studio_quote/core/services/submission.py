from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


def build_payload(name: str, email: str, message: str) -> dict:
    return {"name": name, "email": email, "message": message}


def submit_order(payload: dict, delay: float = 1.0, sleep: Callable[[float], None] = time.sleep) -> bool:
    """
    Demo transport: log the request instead of mailing it.

    Waits ``delay`` seconds to mimic a network round trip and always reports success.
    """
    logger.info("Order request from %s <%s> (mail delivery disabled)", payload.get("name"), payload.get("email"))
    logger.debug("Message:\n%s", payload.get("message"))
    if delay > 0:
        sleep(delay)
    return True
