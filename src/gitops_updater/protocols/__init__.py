"""Protocol definitions for core interfaces maintained in this package."""

from .git_client_protocol import GitClientError, GitClientProtocol
from .name_generator_protocol import NameGeneratorProtocol
from .yaml_patcher_protocol import YAMLPatcherProtocol

__all__ = [
    "GitClientError",
    "GitClientProtocol",
    "NameGeneratorProtocol",
    "YAMLPatcherProtocol",
]
