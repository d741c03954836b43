"""Set values in YAML documents by dotted key path, keeping their formatting."""

from io import StringIO
from typing import Any, List, Union

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from src.gitops_updater.protocols import YAMLPatcherProtocol

Container = Union[CommentedMap, CommentedSeq]


class KeyPathError(ValueError):
    """Raised when a key path cannot be applied to a document."""


def split_key_path(path: str) -> List[str]:
    """
    Split a dotted key path into its components.

    A backslash escapes the following character, so ``a\\.b`` addresses the
    single key ``a.b``.
    """
    if not path:
        raise KeyPathError("key path must not be empty")

    parts: List[str] = []
    current: List[str] = []
    escaped = False
    for char in path:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    if escaped:
        current.append("\\")
    parts.append("".join(current))

    if any(part == "" for part in parts):
        raise KeyPathError(f"invalid key path {path!r}: empty path component")
    return parts


def _parse_index(part: str, path: str) -> int:
    try:
        return int(part)
    except ValueError:
        raise KeyPathError(
            f"invalid key path {path!r}: {part!r} is not a sequence index"
        ) from None


class YAMLPatcher(YAMLPatcherProtocol):
    """
    Round-trip YAML patcher built on ruamel.yaml.

    Comments, key order and quoting of untouched values survive the update.
    Missing mapping keys along the path are created. Sequence components are
    indices from 0; -1 appends when it is the last component.
    """

    def __init__(
        self,
        mapping_indent: int = 2,
        sequence_indent: int = 2,
        sequence_offset: int = 0,
    ) -> None:
        self._mapping_indent = mapping_indent
        self._sequence_indent = sequence_indent
        self._sequence_offset = sequence_offset

    def _new_yaml(self) -> YAML:
        yaml = YAML()
        yaml.preserve_quotes = True
        yaml.width = 4096
        yaml.indent(
            mapping=self._mapping_indent,
            sequence=self._sequence_indent,
            offset=self._sequence_offset,
        )
        return yaml

    def set_by_path(self, data: bytes, path: str, value: Any) -> bytes:
        parts = split_key_path(path)
        text = data.decode("utf-8")

        yaml = self._new_yaml()
        yaml.explicit_start = text.lstrip().startswith("---")
        document = yaml.load(text)
        if document is None:
            document = CommentedMap()
        if not isinstance(document, (CommentedMap, CommentedSeq)):
            raise KeyPathError(
                f"cannot set {path!r}: the document root is not a mapping or sequence"
            )

        node: Container = document
        for depth, part in enumerate(parts[:-1]):
            node = self._descend(node, part, path, parts[: depth + 1])

        if self._is_current_value(node, parts[-1], value):
            return data

        self._assign(node, parts[-1], value, path)

        stream = StringIO()
        yaml.dump(document, stream)
        return stream.getvalue().encode("utf-8")

    def _descend(
        self, node: Container, part: str, path: str, walked: List[str]
    ) -> Container:
        if isinstance(node, CommentedSeq):
            index = _parse_index(part, path)
            if not 0 <= index < len(node):
                raise KeyPathError(
                    f"invalid key path {path!r}: index {index} out of range"
                )
            child = node[index]
            if child is None:
                child = node[index] = CommentedMap()
        else:
            child = node.get(part)
            if child is None:
                child = node[part] = CommentedMap()

        if not isinstance(child, (CommentedMap, CommentedSeq)):
            raise KeyPathError(
                f"cannot set {path!r}: {'.'.join(walked)} is a scalar value"
            )
        return child

    def _is_current_value(self, node: Container, part: str, value: Any) -> bool:
        if isinstance(node, CommentedSeq):
            try:
                index = int(part)
            except ValueError:
                return False
            if not 0 <= index < len(node):
                return False
            current = node[index]
        else:
            if part not in node:
                return False
            current = node[part]
        if isinstance(value, str):
            return isinstance(current, str) and current == value
        return type(current) is type(value) and current == value

    def _assign(self, node: Container, part: str, value: Any, path: str) -> None:
        if isinstance(node, CommentedMap):
            node[part] = value
            return

        index = _parse_index(part, path)
        if index == -1 or index == len(node):
            node.append(value)
        elif 0 <= index < len(node):
            node[index] = value
        else:
            raise KeyPathError(f"invalid key path {path!r}: index {index} out of range")


_default_patcher = YAMLPatcher()


def set_bytes(data: bytes, path: str, value: Any) -> bytes:
    """
    Update the key at ``path`` in the YAML body ``data``.

    e.g. set_bytes(b"name: testing\\n", "name", "new name") returns
    b"name: new name\\n"
    """
    return _default_patcher.set_by_path(data, path, value)
