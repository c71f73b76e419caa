"""
Shared pytest fixtures.

- Entrant: minimal element that satisfies the Admissible protocol
- logged-in / logged-out TicketSiteUser factories
"""

import os
import sys
from dataclasses import dataclass

import pytest

# Add repo root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import Ticket, TicketSiteUser


@dataclass(eq=False)
class Entrant:
    name: str
    admissible: bool = True

    def is_admissible(self) -> bool:
        return self.admissible

    def __str__(self) -> str:
        return self.name


@pytest.fixture
def entrants():
    return [Entrant("a"), Entrant("b"), Entrant("c"), Entrant("d"), Entrant("e")]


@pytest.fixture
def make_user():
    """Build a TicketSiteUser, logged in unless told otherwise."""
    def _make(username="alice", password="pw", card="1234567812345678", logged_in=True):
        user = TicketSiteUser(username, password, card)
        if logged_in:
            assert user.login(username, password)
        return user
    return _make


@pytest.fixture
def ticket():
    return Ticket("Eras Tour", "Camp Randall", "A", "12", 99.5)
