"""Mailchimp list repository handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from mailchimp_lists.clients.base import BaseClient
from mailchimp_lists.exceptions import ListsInvalidClientError
from mailchimp_lists.repository import ListRepository


class ListRepositoryHandler:
    """
    Handler building the list repository from its client definition.

    The definition is a dict structured like settings.MAILCHIMP_LISTS:
    * `CLIENT`: dotted path of a BaseClient subclass, or a client instance
      already configured (handy to share one client or inject a test double).
    * `PARAMETERS`: keyword arguments given to the client class, only when
      `CLIENT` is a dotted path.
    """

    def __init__(self, config=None):
        """Initialize the handler."""
        self._config = config
        self._repository = None

    @cached_property
    def config(self):
        """Put in cache the client definition from the settings."""
        if self._config is None:
            try:
                self._config = settings.MAILCHIMP_LISTS.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.MAILCHIMP_LISTS is not configured") from e
        return self._config

    def __call__(self):
        """Create if not existing the repository and then return it."""
        if self._repository is None:
            self._repository = ListRepository(self.create_client(self.config))
        return self._repository

    def create_client(self, params) -> BaseClient:
        """Return the configured client, instantiating it from its dotted path if needed."""
        client = params.get("CLIENT")
        if isinstance(client, BaseClient):
            if params.get("PARAMETERS"):
                raise ImproperlyConfigured("PARAMETERS cannot be used with an already instantiated client")
            return client
        if not isinstance(client, str):
            raise ListsInvalidClientError(f"Invalid client {client!r}, expected a dotted path or a client instance")

        try:
            klass = import_string(client)
        except ImportError as e:
            raise ListsInvalidClientError(f"Could not find client {client!r}: {e}") from e
        if not (isinstance(klass, type) and issubclass(klass, BaseClient)):
            raise ListsInvalidClientError(f"Client {client!r} is not a {BaseClient.__name__} subclass")
        return klass(**params.get("PARAMETERS", {}))
