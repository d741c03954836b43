"""Service modules for GitOps file updates."""

from .content_updaters import ContentUpdater, replace_contents, update_yaml
from .name_generator import NameGenerator
from .updater import UpdateError, Updater
from .yaml_patcher import KeyPathError, YAMLPatcher, set_bytes

__all__ = [
    "ContentUpdater",
    "KeyPathError",
    "NameGenerator",
    "UpdateError",
    "Updater",
    "YAMLPatcher",
    "replace_contents",
    "set_bytes",
    "update_yaml",
]
