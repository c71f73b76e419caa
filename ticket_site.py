from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

from models import Ticket, TicketSiteUser
from queue_gate import AdmissionQueue, QueueFullError

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_CAPACITY = 10


def default_capacity() -> int:
    """Queue capacity from TICKET_QUEUE_CAPACITY, falling back to DEFAULT_QUEUE_CAPACITY."""
    raw = os.getenv("TICKET_QUEUE_CAPACITY")
    if raw is None or not raw.strip():
        return DEFAULT_QUEUE_CAPACITY
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"TICKET_QUEUE_CAPACITY must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"TICKET_QUEUE_CAPACITY must be >= 1, got {value}")
    return value


class TicketSite:
    """
    Ticket sale front desk

    - accounts: dict username -> TicketSiteUser
    - purchase line: AdmissionQueue (FIFO, bounded)
    - waiting list view: isolated iterator over the line
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.users: dict[str, TicketSiteUser] = {}
        self.purchase_queue: AdmissionQueue[TicketSiteUser] = AdmissionQueue(
            default_capacity() if capacity is None else capacity
        )
        self._queued_set: set[str] = set()

    # -------------------------
    # accounts
    # -------------------------
    def register(self, username: str, password: str, card_number: str) -> Optional[TicketSiteUser]:
        username = (username or "").strip()
        if not username or not password:
            return None
        if username in self.users:
            logger.warning("registration rejected: %s already exists", username)
            return None
        try:
            user = TicketSiteUser(username, password, card_number)
        except ValueError as e:
            logger.warning("registration rejected for %s: %s", username, e)
            return None
        self.users[username] = user
        logger.info("registered user %s", username)
        return user

    def login(self, username: str, password: str) -> Tuple[bool, str]:
        user = self.users.get(username)
        if user is None or not user.login(username, password):
            logger.warning("failed login for %s", username)
            return False, "wrong username or password"
        logger.info("%s logged in", username)
        return True, f"welcome {username}"

    def logout(self, username: str) -> bool:
        user = self.users.get(username)
        if user is None:
            return False
        user.logout()
        logger.info("%s logged out", username)
        return True

    # -------------------------
    # purchase line
    # -------------------------
    def join_queue(self, username: str) -> Tuple[bool, str]:
        user = self.users.get(username)
        if user is None:
            return False, "user does not exist"
        if username in self._queued_set:
            return False, "already waiting in line"

        try:
            self.purchase_queue.enqueue(user)
        except QueueFullError:
            logger.warning("%s turned away: queue full (%d/%d)",
                           username, self.purchase_queue.size(), self.purchase_queue.capacity())
            return False, "the line is full, try again later"
        except ValueError:
            logger.warning("%s turned away: not eligible to buy", username)
            return False, "log in first; one ticket per user"

        self._queued_set.add(username)
        logger.info("%s joined the line at position %d", username, self.purchase_queue.size())
        return True, f"added to the line (position {self.purchase_queue.size()})"

    def process_next_purchase(self, ticket: Ticket) -> Tuple[bool, str]:
        if self.purchase_queue.is_empty():
            return False, "nobody is waiting"

        user = self.purchase_queue.dequeue()
        self._queued_set.discard(user.username)

        # state may have changed while waiting (logout, ticket bought elsewhere)
        if not user.can_buy_ticket():
            logger.info("skipped %s: no longer eligible", user.username)
            return False, f"{user.username} can no longer buy a ticket (skipped)"

        user.buy_ticket(ticket)
        logger.info("sold %s to %s", ticket, user.username)
        return True, f"{user.username} bought {ticket}"

    def set_capacity(self, capacity: int) -> None:
        self.purchase_queue.set_capacity(capacity)

    # -------------------------
    # views
    # -------------------------
    def get_queue_size(self) -> int:
        return self.purchase_queue.size()

    def get_capacity(self) -> int:
        return self.purchase_queue.capacity()

    def list_waiting(self) -> list[str]:
        return [user.username for user in self.purchase_queue]

    def queue_display(self) -> str:
        return self.purchase_queue.to_display()
