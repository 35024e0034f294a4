"""Mailchimp lists exceptions module."""


class MailchimpListsError(Exception):
    """Base exception for all mailchimp lists exceptions."""


class ListsInvalidClientError(MailchimpListsError):
    """Exception raised when the configured API client is invalid."""


class ApiError(MailchimpListsError):
    """Exception raised when the Mailchimp API reports a failure."""


class BatchSubmissionError(ApiError):
    """
    Exception raised when a batch of operations could not be submitted.

    `batch_ids` holds the ids of the chunks submitted before the failure, so
    that the caller can still poll them.
    """

    def __init__(self, message, batch_ids=None):
        """Keep track of the batches already submitted."""
        super().__init__(message)
        self.batch_ids = list(batch_ids or [])
