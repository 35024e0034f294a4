"""Mailing list subscriber."""

import hashlib
from dataclasses import dataclass, field
from enum import Enum


class MemberStatus(str, Enum):
    """Status of a member on a Mailchimp list."""

    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"
    CLEANED = "cleaned"
    PENDING = "pending"
    TRANSACTIONAL = "transactional"


def subscriber_hash(email: str) -> str:
    """
    Compute the Mailchimp member identifier of an email address.

    Mailchimp identifies list members by the MD5 hex digest of the
    lower-cased email address.
    """
    email = (email or "").strip().lower()
    if not email:
        raise ValueError("An email address is required to compute the subscriber hash.")
    return hashlib.md5(email.encode(), usedforsecurity=False).hexdigest()


@dataclass(frozen=True)
class Subscriber:
    """
    A member of a Mailchimp list.

    `merge_fields` holds the list custom fields (FNAME, LNAME, ...) and
    `options` any other member attribute accepted by the API (language, vip,
    email_type, tags, location...), sent as is.
    """

    email: str
    merge_fields: dict = field(default_factory=dict)
    status: MemberStatus | None = None
    options: dict = field(default_factory=dict)

    def __post_init__(self):
        """Reject subscribers without email address."""
        if not self.email or not self.email.strip():
            raise ValueError("Subscriber email address must not be empty.")

    @property
    def hash(self) -> str:
        """Return the member identifier used in the API resource paths."""
        return subscriber_hash(self.email)

    def format_mailchimp(self) -> dict:
        """Format the subscriber the way the Mailchimp members API expects it."""
        return {
            **self.options,
            "email_address": self.email,
            "merge_fields": dict(self.merge_fields),
        }
