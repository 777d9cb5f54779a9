"""Protocol for the places a profile document can come from."""

from typing import Any, Protocol, runtime_checkable

# Highest ``schema_version`` this release understands
CURRENT_SCHEMA_VERSION = 1


@runtime_checkable
class ConfigSource(Protocol):
    """A source of raw profile data for :class:`ConfigLoader`.

    Sources only read and shape-check; model validation happens in the
    loader. See YAMLConfigSource and DefaultConfigSource.
    """

    def load(self) -> tuple[dict[str, Any], int]:
        """Return ``(profile_data, schema_version)``.

        ``profile_data`` never contains the ``schema_version`` key.

        Raises:
            ConfigError: If the source cannot be read or has the wrong shape
        """
        ...

    @property
    def source_description(self) -> str:
        """Where the data came from, for log and error messages."""
        ...
