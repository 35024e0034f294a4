"""Test the list subscriber."""

import hashlib

import pytest

from mailchimp_lists.subscriber import MemberStatus, Subscriber, subscriber_hash


def test_subscriber_hash_is_md5_of_lower_cased_email():
    """The member identifier is the MD5 digest of the lower-cased address."""
    assert subscriber_hash("jane@example.com") == hashlib.md5(b"jane@example.com").hexdigest()  # noqa: S324


def test_subscriber_hash_ignores_case_and_surrounding_spaces():
    """Differently written addresses share the same member identifier."""
    assert subscriber_hash("  Jane@Example.COM ") == subscriber_hash("jane@example.com")


def test_subscriber_hash_is_deterministic():
    """Hashing the same address twice gives the same result."""
    assert subscriber_hash("jane@example.com") == subscriber_hash("jane@example.com")
    assert subscriber_hash("jane@example.com") != subscriber_hash("john@example.com")


def test_subscriber_hash_empty_email():
    """An empty address has no member identifier."""
    with pytest.raises(ValueError):
        subscriber_hash("  ")


@pytest.mark.parametrize("email", ["", "   "])
def test_subscriber_requires_email(email):
    """A subscriber cannot be created without email address."""
    with pytest.raises(ValueError, match="must not be empty"):
        Subscriber(email=email)


def test_subscriber_hash_property():
    """The subscriber exposes its member identifier."""
    assert Subscriber(email="Jane@example.com").hash == subscriber_hash("jane@example.com")


def test_subscriber_format_mailchimp():
    """The subscriber is formatted with its email, merge fields and options."""
    subscriber = Subscriber(
        email="jane@example.com",
        merge_fields={"FNAME": "Jane"},
        status=MemberStatus.PENDING,
        options={"language": "fr", "vip": True},
    )

    assert subscriber.format_mailchimp() == {
        "email_address": "jane@example.com",
        "merge_fields": {"FNAME": "Jane"},
        "language": "fr",
        "vip": True,
    }


def test_subscriber_format_mailchimp_options_do_not_override_email():
    """Options cannot replace the email address or the merge fields."""
    subscriber = Subscriber(
        email="jane@example.com",
        options={"email_address": "other@example.com", "merge_fields": {"X": 1}},
    )

    assert subscriber.format_mailchimp() == {"email_address": "jane@example.com", "merge_fields": {}}
