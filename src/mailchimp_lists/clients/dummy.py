"""Dummy Mailchimp client."""

import copy

from mailchimp_lists.clients import ApiResult

from .base import BaseClient


class DummyClient(BaseClient):
    """
    Client never reaching the network.

    Every call is recorded in `calls`, canned results can be registered with
    `set_response`. Submitted batches get sequential ids.
    """

    def __init__(self):
        """Initialize the recorded calls and canned results."""
        super().__init__()
        self.calls = []
        self.batches = {}
        self._responses = {}

    def set_response(self, method: str, path: str, data: dict | None = None, error: str | None = None):
        """Register the result returned for a method and path."""
        self._responses[(method, path)] = ApiResult.failure(error) if error else ApiResult.ok(data)

    def send(self, method: str, path: str, data: dict | None = None) -> ApiResult:
        """Record the call and return the registered result."""
        self.calls.append((method, path, data))
        if (method, path) in self._responses:
            result = self._responses[(method, path)]
            return ApiResult(success=result.success, data=copy.deepcopy(result.data), error=result.error)

        if method == "POST" and path == "batches":
            batch_id = f"batch{len(self.batches) + 1}"
            self.batches[batch_id] = {
                "id": batch_id,
                "status": "pending",
                "total_operations": len(data["operations"]),
            }
            return ApiResult.ok(dict(self.batches[batch_id]))
        if method == "GET" and path.startswith("batches/"):
            batch = self.batches.get(path.removeprefix("batches/"))
            if batch is None:
                return ApiResult.failure("404: The requested resource could not be found.")
            return ApiResult.ok(dict(batch))
        return ApiResult.ok()
