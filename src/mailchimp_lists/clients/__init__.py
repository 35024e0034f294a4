"""Mailchimp API clients module."""

from dataclasses import dataclass, field

from mailchimp_lists.exceptions import ApiError


@dataclass
class ApiResult:
    """Outcome of a single call to the Mailchimp API."""

    success: bool
    data: dict = field(default_factory=dict)
    error: str | None = None

    @classmethod
    def ok(cls, data: dict | None = None) -> "ApiResult":
        """Build a successful result."""
        return cls(success=True, data=data or {})

    @classmethod
    def failure(cls, error: str) -> "ApiResult":
        """Build a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> dict:
        """Return the response payload or raise an ApiError with the API error message."""
        if not self.success:
            raise ApiError(self.error)
        return self.data
