"""Test the request payload builders."""

from mailchimp_lists.payloads import (
    MergeFieldData,
    merge_field_payload,
    subscribe_payload,
    unsubscribe_payload,
    update_payload,
)
from mailchimp_lists.subscriber import MemberStatus, Subscriber


def test_subscribe_payload_forces_subscribed_status():
    """The subscriber status is always replaced by subscribed."""
    subscriber = Subscriber(
        email="jane@example.com", merge_fields={"FNAME": "Jane"}, status=MemberStatus.UNSUBSCRIBED
    )

    assert subscribe_payload(subscriber) == {
        "email_address": "jane@example.com",
        "merge_fields": {"FNAME": "Jane"},
        "status": "subscribed",
    }


def test_update_payload_without_status():
    """The member status is left unchanged when the subscriber has none."""
    subscriber = Subscriber(email="jane@example.com", merge_fields={"FNAME": "Jane"})

    assert update_payload(subscriber) == {"email_address": "jane@example.com", "merge_fields": {"FNAME": "Jane"}}


def test_update_payload_with_status():
    """The subscriber status is sent when set."""
    subscriber = Subscriber(email="jane@example.com", status=MemberStatus.PENDING)

    assert update_payload(subscriber)["status"] == "pending"


def test_unsubscribe_payload():
    """Only the status is sent to unsubscribe a member."""
    assert unsubscribe_payload() == {"status": "unsubscribed"}


def test_merge_field_data_to_payload_drops_unset_values():
    """Unset merge field attributes are not sent."""
    data = MergeFieldData(name="Birthday", type="birthday", tag="BDAY", required=False)

    assert data.to_payload() == {"name": "Birthday", "type": "birthday", "tag": "BDAY", "required": False}


def test_merge_field_payload_accepts_mapping():
    """A mapping is sent as is."""
    assert merge_field_payload({"name": "City", "type": "text"}) == {"name": "City", "type": "text"}


def test_merge_field_payload_with_options():
    """Merge field options are kept when set."""
    data = MergeFieldData(name="Size", type="dropdown", options={"choices": ["S", "M", "L"]})

    assert merge_field_payload(data) == {"name": "Size", "type": "dropdown", "options": {"choices": ["S", "M", "L"]}}
