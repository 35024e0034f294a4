"""Mailchimp lists module."""

from django.utils.functional import LazyObject

from .handler import ListRepositoryHandler


class DefaultListRepository(LazyObject):
    """Lazy object giving access to the configured list repository."""

    def _setup(self):
        """Configure the list repository."""
        self._wrapped = list_repository_handler()


list_repository_handler = ListRepositoryHandler()
list_repository = DefaultListRepository()
