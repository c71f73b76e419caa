import pytest

from models import CARD_NUMBER_LENGTH, Ticket, TicketSiteUser


def test_ticket_display(ticket):
    assert str(ticket) == "Eras Tour @Camp Randall A:12 - $99.5"


def test_card_number_length_enforced():
    with pytest.raises(ValueError):
        TicketSiteUser("bob", "pw", "1234")
    with pytest.raises(ValueError):
        TicketSiteUser("bob", "pw", "1" * (CARD_NUMBER_LENGTH + 1))


def test_secrets_not_stored_in_plaintext():
    user = TicketSiteUser("bob", "hunter2", "1111222233334444")
    assert "hunter2" not in vars(user).values()
    assert "1111222233334444" not in vars(user).values()
    assert user.check_card("1111222233334444")
    assert not user.check_card("0000000000000000")


def test_login_requires_matching_username_and_password(make_user):
    user = make_user(logged_in=False)
    assert not user.login("alice", "wrong")
    assert not user.login("mallory", "pw")
    assert not user.is_logged_in
    assert user.login("alice", "pw")
    assert user.is_logged_in


def test_new_user_cannot_buy_until_logged_in(make_user):
    user = make_user(logged_in=False)
    assert not user.can_buy_ticket()
    assert not user.is_admissible()


def test_logout_blocks_purchase(make_user):
    user = make_user()
    assert user.is_admissible()
    user.logout()
    assert not user.is_logged_in
    assert not user.is_admissible()


def test_one_ticket_per_user(make_user, ticket):
    user = make_user()
    assert user.ticket is None
    user.buy_ticket(ticket)
    assert user.has_ticket()
    assert user.ticket is ticket
    assert not user.can_buy_ticket()


def test_user_display(make_user, ticket):
    user = make_user()
    assert str(user) == "alice: *"
    user.buy_ticket(ticket)
    assert str(user) == "alice: Eras Tour @Camp Randall A:12 - $99.5"


def test_ticket_price_keeps_float_form():
    assert str(Ticket("Show", "Hall", "B", "3", 45.0)) == "Show @Hall B:3 - $45.0"
