"""Mailchimp lists tasks module."""

from celery import shared_task

from mailchimp_lists import list_repository
from mailchimp_lists.subscriber import Subscriber


@shared_task
def batch_subscribe(list_id: str, subscribers: list[dict]):
    """
    Subscribe many subscribers to a list.

    Each subscriber is a dict with an `email` key and optional `merge_fields`
    and `options` keys.
    """
    return list_repository.batch_subscribe(
        list_id,
        [
            Subscriber(
                email=subscriber["email"],
                merge_fields=subscriber.get("merge_fields") or {},
                options=subscriber.get("options") or {},
            )
            for subscriber in subscribers
        ],
    )


@shared_task
def batch_unsubscribe(list_id: str, emails: list[str]):
    """Unsubscribe many email addresses from a list."""
    return list_repository.batch_unsubscribe(list_id, emails)


@shared_task
def batch_delete(list_id: str, emails: list[str]):
    """Delete many email addresses from a list."""
    return list_repository.batch_delete(list_id, emails)
