"""Mailchimp API client base module."""

import json
import logging
from abc import ABC, abstractmethod

from mailchimp_lists.clients import ApiResult

logger = logging.getLogger(__name__)


class BaseClient(ABC):
    """Base class for all Mailchimp API clients."""

    def __init__(self):
        """Initialize the client state."""
        self.last_error = None

    @abstractmethod
    def send(self, method: str, path: str, data: dict | None = None) -> ApiResult:
        """
        Send one request to the API.

        Args:
            method: HTTP method, upper case
            path: resource path relative to the API root, e.g. "lists/abc123"
            data: JSON body of the request

        Returns:
            ApiResult: the decoded response or the error reported by the API

        """

    def request(self, method: str, path: str, data: dict | None = None) -> ApiResult:
        """Send a request and remember its error, if any."""
        result = self.send(method, path, data)
        self.last_error = result.error
        if not result.success:
            logger.warning("Mailchimp %s %s failed: %s", method, path, result.error)
        return result

    def get(self, path: str, data: dict | None = None) -> ApiResult:
        """Send a GET request, `data` being used as query parameters."""
        return self.request("GET", path, data)

    def post(self, path: str, data: dict | None = None) -> ApiResult:
        """Send a POST request."""
        return self.request("POST", path, data)

    def patch(self, path: str, data: dict | None = None) -> ApiResult:
        """Send a PATCH request."""
        return self.request("PATCH", path, data)

    def delete(self, path: str) -> ApiResult:
        """Send a DELETE request."""
        return self.request("DELETE", path)

    def new_batch(self) -> "Batch":
        """Open a new batch of operations."""
        return Batch(self)

    def get_batch(self, batch_id: str) -> ApiResult:
        """Retrieve the status record of a submitted batch."""
        return self.get(f"batches/{batch_id}")


class Batch:
    """
    A set of operations submitted at once to the Mailchimp batch endpoint.

    Operations are queued locally, `execute` submits them in one request and
    the remote service runs them asynchronously. `check_status` reads the
    batch record back, its `id` being what callers poll afterwards.
    """

    def __init__(self, client: BaseClient):
        """Attach the batch to a client."""
        self.client = client
        self.operations = []
        self.batch_id = None

    def _queue(self, method, operation_id, path, data=None):
        operation = {"method": method, "path": path, "operation_id": operation_id}
        if data is not None:
            operation["body"] = data
        self.operations.append(operation)

    def post(self, operation_id: str, path: str, data: dict | None = None):
        """Queue a POST operation."""
        self._queue("POST", operation_id, path, data)

    def patch(self, operation_id: str, path: str, data: dict | None = None):
        """Queue a PATCH operation."""
        self._queue("PATCH", operation_id, path, data)

    def delete(self, operation_id: str, path: str):
        """Queue a DELETE operation."""
        self._queue("DELETE", operation_id, path)

    def execute(self) -> ApiResult:
        """Submit the queued operations."""
        # the batch endpoint expects each operation body as a JSON string
        operations = [
            {**operation, "body": json.dumps(operation["body"])} if "body" in operation else operation
            for operation in self.operations
        ]
        result = self.client.post("batches", {"operations": operations})
        if result.success:
            self.batch_id = result.data.get("id")
        return result

    def check_status(self) -> ApiResult:
        """Read the record of the submitted batch."""
        if self.batch_id is None:
            return ApiResult.failure("No batch has been submitted")
        return self.client.get_batch(self.batch_id)
