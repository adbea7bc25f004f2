from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from src.staff_portal.staff_portal.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from src.staff_portal.staff_portal.users.model import User


def test_authenticate_with_right_password(make_auth, user, staff):
    assert make_auth(user, staff).authenticate("Asha@Example.com ", "secret1").user_id == 1


def test_wrong_password_raises(make_auth, user, staff):
    with pytest.raises(AuthenticationError):
        make_auth(user, staff).authenticate("asha@example.com", "wrong")


def test_unknown_email_raises(make_auth, user, staff):
    with pytest.raises(AuthenticationError):
        make_auth(user, staff).authenticate("nobody@example.com", "secret1")


def test_inactive_user_cannot_sign_in(make_auth, staff):
    inactive = User(user_id=1, email="asha@example.com", password_hash=generate_password_hash("secret1"), is_active=False)
    with pytest.raises(AuthenticationError):
        make_auth(inactive, staff).authenticate("asha@example.com", "secret1")


def test_placeholder_hash_is_rejected(make_auth, staff):
    broken = User(user_id=1, email="asha@example.com", password_hash="CHANGE_ME")
    with pytest.raises(AuthenticationError):
        make_auth(broken, staff).authenticate("asha@example.com", "CHANGE_ME")


@pytest.mark.parametrize("email", ["  ", None, 5])
def test_blank_or_non_text_email_is_a_validation_error(make_auth, user, staff, email):
    with pytest.raises(ValidationError):
        make_auth(user, staff).authenticate(email, "secret1")


def test_resolve_session_carries_staff_profile(make_auth, user, staff):
    portal = make_auth(user, staff).resolve_session(1)

    assert portal.staff_id == 7
    assert portal.to_dict()["staff"]["full_name"] == "Asha Rao"


def test_resolve_session_without_profile(make_auth, user):
    with pytest.raises(NotFoundError):
        make_auth(user).resolve_session(1)
