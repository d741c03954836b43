"""Protocol definition for branch name generation."""

from typing import Protocol


class NameGeneratorProtocol(Protocol):
    """Protocol for generating unique names from a prefix."""

    def prefixed_name(self, prefix: str) -> str:
        """Return ``prefix`` followed by a suffix that is unlikely to collide."""
        ...
