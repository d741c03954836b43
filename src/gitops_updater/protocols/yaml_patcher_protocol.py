"""Protocol definition for structured YAML updates."""

from typing import Any, Protocol


class YAMLPatcherProtocol(Protocol):
    """Protocol for setting a value in a YAML document by dotted key path."""

    def set_by_path(self, data: bytes, path: str, value: Any) -> bytes:
        """
        Return ``data`` with the value at ``path`` replaced by ``value``.

        Raises:
            ValueError: If ``path`` is not a valid path into the document.
            ruamel.yaml.error.YAMLError: If ``data`` is not valid YAML.
        """
        ...
