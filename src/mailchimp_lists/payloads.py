"""Request payloads sent to the Mailchimp lists API."""

from dataclasses import asdict, dataclass, field

from mailchimp_lists.subscriber import MemberStatus, Subscriber


def subscribe_payload(subscriber: Subscriber) -> dict:
    """Build the payload adding a member, whatever the subscriber status is."""
    return {**subscriber.format_mailchimp(), "status": MemberStatus.SUBSCRIBED.value}


def update_payload(subscriber: Subscriber) -> dict:
    """Build the payload updating a member, its status only changes when set on the subscriber."""
    payload = subscriber.format_mailchimp()
    if subscriber.status is not None:
        payload["status"] = MemberStatus(subscriber.status).value
    return payload


def unsubscribe_payload() -> dict:
    """Build the payload unsubscribing a member, merge fields are left untouched."""
    return {"status": MemberStatus.UNSUBSCRIBED.value}


@dataclass
class MergeFieldData:
    """Definition of a list merge field."""

    name: str
    type: str
    tag: str | None = None
    required: bool | None = None
    default_value: str | None = None
    public: bool | None = None
    display_order: int | None = None
    help_text: str | None = None
    options: dict = field(default_factory=dict)

    def to_payload(self) -> dict:
        """Return the merge field as expected by the API, without unset values."""
        return {key: value for key, value in asdict(self).items() if value not in (None, {})}


def merge_field_payload(data: MergeFieldData | dict) -> dict:
    """Accept either a MergeFieldData or an already built mapping."""
    if isinstance(data, MergeFieldData):
        return data.to_payload()
    return dict(data)
