"""Functions that turn the current content of a file into its new content."""

from typing import Any, Callable, Optional

from src.gitops_updater.protocols import YAMLPatcherProtocol
from src.gitops_updater.services.yaml_patcher import YAMLPatcher

ContentUpdater = Callable[[bytes], bytes]


def replace_contents(body: bytes) -> ContentUpdater:
    """Return a ContentUpdater that replaces the file with ``body``."""

    def _replace(_: bytes) -> bytes:
        return body

    return _replace


def update_yaml(
    key: str, new_value: Any, patcher: Optional[YAMLPatcherProtocol] = None
) -> ContentUpdater:
    """
    Return a ContentUpdater that sets ``key`` to ``new_value`` in a YAML file.

    The key can be a dotted path, e.g. ``update_yaml("test.image", "nginx:1.25")``.
    """
    yaml_patcher = patcher or YAMLPatcher()

    def _update(current: bytes) -> bytes:
        return yaml_patcher.set_by_path(current, key, new_value)

    return _update
