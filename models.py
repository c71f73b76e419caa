from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

CARD_NUMBER_LENGTH = 16


@dataclass
class Ticket:
    event_name: str
    venue: str
    section: str
    seat_number: str
    price: float

    def __str__(self) -> str:
        return f"{self.event_name} @{self.venue} {self.section}:{self.seat_number} - ${self.price}"


class TicketSiteUser:
    """
    A site account that can wait in the purchase queue.

    Password and card number are only kept as werkzeug hashes.
    A user may enter the queue while logged in and not yet holding a ticket.
    """

    def __init__(self, username: str, password: str, card_number: str) -> None:
        if len(card_number) != CARD_NUMBER_LENGTH:
            raise ValueError(f"card number must be {CARD_NUMBER_LENGTH} digits long")
        self.username = username
        self._password_hash = generate_password_hash(password)
        self._card_hash = generate_password_hash(card_number)
        self._logged_in = False
        self._ticket: Optional[Ticket] = None

    # -------------------------
    # session
    # -------------------------
    def login(self, username: str, password: str) -> bool:
        if username != self.username or not check_password_hash(self._password_hash, password):
            return False
        self._logged_in = True
        return True

    def logout(self) -> None:
        self._logged_in = False

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    def check_card(self, card_number: str) -> bool:
        return check_password_hash(self._card_hash, card_number)

    # -------------------------
    # ticket
    # -------------------------
    @property
    def ticket(self) -> Optional[Ticket]:
        return self._ticket

    def has_ticket(self) -> bool:
        return self._ticket is not None

    def buy_ticket(self, ticket: Ticket) -> None:
        self._ticket = ticket

    def can_buy_ticket(self) -> bool:
        return self._logged_in and not self.has_ticket()

    def is_admissible(self) -> bool:
        return self.can_buy_ticket()

    def __str__(self) -> str:
        return f"{self.username}: {'*' if self._ticket is None else self._ticket}"

    def __repr__(self) -> str:
        return f"TicketSiteUser(username={self.username!r}, logged_in={self._logged_in})"
