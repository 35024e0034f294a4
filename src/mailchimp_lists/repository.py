"""Mailchimp list repository."""

import logging
from collections.abc import Iterable, Iterator
from itertools import islice

from mailchimp_lists.clients.base import Batch, BaseClient
from mailchimp_lists.exceptions import BatchSubmissionError
from mailchimp_lists.payloads import (
    MergeFieldData,
    merge_field_payload,
    subscribe_payload,
    unsubscribe_payload,
    update_payload,
)
from mailchimp_lists.subscriber import Subscriber, subscriber_hash

logger = logging.getLogger(__name__)

SUBSCRIBER_BATCH_SIZE = 300


def chunked(items: Iterable, size: int = SUBSCRIBER_BATCH_SIZE) -> Iterator[list]:
    """Split items in lists of at most `size` elements, keeping their order."""
    iterator = iter(items)
    while chunk := list(islice(iterator, size)):
        yield chunk


class ListRepository:
    """
    Manage the members and merge fields of Mailchimp lists.

    Single item operations issue one request and raise an ApiError carrying
    the API error message when it fails.

    Batch operations split their input in chunks of SUBSCRIBER_BATCH_SIZE
    items, as recommended by Mailchimp, and submit one batch per chunk. They
    return the batch ids, in chunk order, without waiting for the batches to
    complete: the outcome of each operation has to be polled with these ids.
    """

    def __init__(self, client: BaseClient):
        """Bind the repository to an API client."""
        self._client = client

    @property
    def client(self) -> BaseClient:
        """Give access to the API client for custom calls."""
        return self._client

    @staticmethod
    def _member_path(list_id, email):
        return f"lists/{list_id}/members/{subscriber_hash(email)}"

    def find_by_id(self, list_id: str) -> dict:
        """Retrieve a list."""
        return self._client.get(f"lists/{list_id}").unwrap()

    def subscribe(self, list_id: str, subscriber: Subscriber) -> dict:
        """Add a subscriber to a list."""
        return self._client.post(f"lists/{list_id}/members", subscribe_payload(subscriber)).unwrap()

    def update(self, list_id: str, subscriber: Subscriber) -> dict:
        """Update a list member."""
        return self._client.patch(self._member_path(list_id, subscriber.email), update_payload(subscriber)).unwrap()

    def unsubscribe(self, list_id: str, subscriber: Subscriber) -> dict:
        """Unsubscribe a list member."""
        return self._client.patch(self._member_path(list_id, subscriber.email), unsubscribe_payload()).unwrap()

    def delete(self, list_id: str, subscriber: Subscriber) -> dict:
        """Delete a list member."""
        return self._client.delete(self._member_path(list_id, subscriber.email)).unwrap()

    def get_subscriber_emails(self, list_id: str) -> list[str]:
        """Return the email address of each list member."""
        result = self._client.get(f"lists/{list_id}/members").unwrap()
        return [member["email_address"] for member in result["members"]]

    def get_merge_fields(self, list_id: str) -> list[dict]:
        """Return the merge fields of a list."""
        return self._client.get(f"lists/{list_id}/merge-fields").unwrap()["merge_fields"]

    def add_merge_field(self, list_id: str, data: MergeFieldData | dict) -> dict:
        """Add a merge field to a list."""
        return self._client.post(f"lists/{list_id}/merge-fields", merge_field_payload(data)).unwrap()

    def update_merge_field(self, list_id: str, merge_id: str | int, data: MergeFieldData | dict) -> dict:
        """Update a merge field of a list."""
        return self._client.patch(f"lists/{list_id}/merge-fields/{merge_id}", merge_field_payload(data)).unwrap()

    def delete_merge_field(self, list_id: str, merge_id: str | int) -> dict:
        """Delete a merge field of a list."""
        return self._client.delete(f"lists/{list_id}/merge-fields/{merge_id}").unwrap()

    def _submit_chunks(self, list_id, items, queue_operation) -> list[str]:
        """
        Submit one batch per chunk of items.

        Args:
            list_id: the list targeted by the operations
            items: subscribers or emails
            queue_operation: callable(batch, operation_id, item) adding the
                operation of one item to the batch

        Returns:
            list[str]: the batch ids, one per chunk

        Raises:
            BatchSubmissionError: if an item cannot be turned into an operation,
                a batch could not be submitted or its status could not be read back

        """
        batch_ids = []
        for chunk in chunked(items):
            batch: Batch = self._client.new_batch()
            try:
                for index, item in enumerate(chunk):
                    queue_operation(batch, f"op{index}", item)
            except (AttributeError, TypeError, ValueError) as err:
                raise BatchSubmissionError(str(err), batch_ids) from err

            result = batch.execute()
            if not result.success:
                raise BatchSubmissionError(result.error, batch_ids)

            status = batch.check_status()
            if not status.success:
                raise BatchSubmissionError(status.error, batch_ids)

            batch_ids.append(status.data["id"])
            logger.info("Submitted batch %s of %d operations on list %s", status.data["id"], len(chunk), list_id)
        return batch_ids

    def batch_subscribe(self, list_id: str, subscribers: Iterable[Subscriber]) -> list[str]:
        """Subscribe many subscribers to a list."""

        def queue(batch, operation_id, subscriber):
            batch.post(operation_id, f"lists/{list_id}/members", subscribe_payload(subscriber))

        return self._submit_chunks(list_id, subscribers, queue)

    def batch_unsubscribe(self, list_id: str, emails: Iterable[str]) -> list[str]:
        """Unsubscribe many email addresses from a list."""

        def queue(batch, operation_id, email):
            batch.patch(operation_id, self._member_path(list_id, email), unsubscribe_payload())

        return self._submit_chunks(list_id, emails, queue)

    def batch_delete(self, list_id: str, emails: Iterable[str]) -> list[str]:
        """Delete many email addresses from a list."""

        def queue(batch, operation_id, email):
            batch.delete(operation_id, self._member_path(list_id, email))

        return self._submit_chunks(list_id, emails, queue)
