"""Notifications — message length and recipient rules."""

import pytest

from crowdin_sdk.core.errors import RequestValidationError
from crowdin_sdk.schemas.notifications import Notification


def test_message_too_long():
    with pytest.raises(RequestValidationError, match="message can't be longer than 10000 characters"):
        Notification(message="a" * 10_001).validate()


def test_message_length_counts_characters():
    """Multi-byte text is measured in characters, not UTF-8 bytes."""
    Notification(message="\u00e9" * 10_000).validate()
    Notification(message="\U0001f600" * 10_000).validate()
    with pytest.raises(RequestValidationError, match="message can't be longer than 10000 characters"):
        Notification(message="\u00e9" * 10_001).validate()


def test_user_ids_and_role_conflict():
    req = Notification(user_ids=[1, 2], role="owner", message="notification message")
    with pytest.raises(RequestValidationError, match="can't specify both user IDs and role"):
        req.validate()


def test_role_must_be_owner_or_manager():
    req = Notification(role="invalid", message="notification message")
    with pytest.raises(RequestValidationError, match="role must be either owner or manager"):
        req.validate()


@pytest.mark.parametrize("req", [
    Notification(message="notification message"),
    Notification(role="owner", message="notification message"),
    Notification(role="manager", message="notification message"),
    Notification(user_ids=[1], message="notification message"),
])
def test_valid_notifications(req):
    req.validate()


def test_payload_omits_unset_fields():
    assert Notification(message="hi", user_ids=[1]).to_payload() == {
        "message": "hi", "userIds": [1],
    }
