"""Custom value classes for django-configurations."""

import os
import re

from configurations import values

API_KEY_PATTERN = re.compile(r"^[0-9a-f]+-[a-z]+[0-9]+$")


class MailchimpApiKeyValue(values.Value):
    """
    Mailchimp API key read from the environment, directly or from a file.

    The value set is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set.
    * The value of the environment variable `{name}` if set.
    * The default value

    A value which is not formatted as `<key>-<datacenter>` is rejected.
    """

    file_suffix = "FILE"

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        if "file_suffix" in kwargs:
            self.file_suffix = kwargs.pop("file_suffix")
        super().__init__(*args, **kwargs)

    def _read_file(self, filename):
        if not os.path.exists(filename):
            raise ValueError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().strip()
        except OSError as err:
            raise ValueError(f"Path {filename!r} cannot be read: {err!r}") from err

    def to_python(self, value):
        """Check the API key format."""
        value = super().to_python(value)
        if value and not API_KEY_PATTERN.match(value):
            raise ValueError("Mailchimp API key must be formatted as '<key>-<datacenter>'.")
        return value

    def setup(self, name):
        """Get the value from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            if full_environ_name_file in os.environ:
                value = self.to_python(self._read_file(os.environ[full_environ_name_file]))
            elif full_environ_name in os.environ:
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ValueError(
                    f"Mailchimp API key {name!r} is required to be set as the "
                    f"environment variable {full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value
