"""Tag-directed encoder.

Renders records (dataclasses), sequences, mappings, pointers, interfaces and
scalars as JSON-shaped text. Record keys come from each field's tag for the
configured target tag instead of the attribute name; fields tagged with the
ignore value are dropped.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

from .config import Config
from .errors import (
    CTX_INTERFACE,
    CTX_MAP_FIELD,
    CTX_POINTER,
    CTX_SLICE_ELEMENT,
    CTX_STRUCT_FIELD,
    MarshalError,
    NilObjectError,
    PropagatedError,
)
from .kinds import Kind, Node, classify
from .scalars import format_scalar, quote
from .tags import field_descriptors


@dataclass(frozen=True)
class Encoder:
    """
    Marshals values using one tag name for record keys.

    Immutable, so one instance can serve concurrent callers.

    Attributes:
        target_tag: Tag name whose values become record output keys
        ignore_value: Tag value marking a field as omitted
    """

    target_tag: str
    ignore_value: str

    @classmethod
    def from_config(cls) -> "Encoder":
        """Encoder using Config.TARGET_TAG and Config.IGNORE_VALUE."""
        return cls(target_tag=Config.TARGET_TAG, ignore_value=Config.IGNORE_VALUE)

    def marshal(self, value: Any) -> bytes:
        """
        Marshal a value into one newline-terminated document.

        A top-level sequence becomes a single array. Use marshal_lines for
        one document per element.

        Args:
            value: Value to encode

        Returns:
            UTF-8 encoded document followed by "\\n"

        Raises:
            NilObjectError: If value is None
            PropagatedError: If an absent value is reached while descending

        Examples:
            >>> Encoder("custom", "-").marshal({"b": 22.2, "a": 21.1})
            b'{"a":21.1,"b":22.2}\\n'
        """
        out: list[str] = []
        try:
            self._encode(value, out)
        except MarshalError as e:
            logger.debug(f"Marshal failed (tag={self.target_tag!r}): {e}")
            raise
        out.append("\n")
        return "".join(out).encode("utf-8")

    def marshal_lines(self, values: Iterable[Any]) -> bytes:
        """
        Marshal each element as its own document, newline-delimited.

        Args:
            values: Iterable of values

        Returns:
            Concatenated documents, each ending in "\\n"; b"" when empty

        Raises:
            NilObjectError: If values is None
            PropagatedError: If any element fails
        """
        if values is None:
            raise NilObjectError()

        chunks: list[bytes] = []
        for item in values:
            try:
                chunks.append(self.marshal(item))
            except MarshalError as e:
                raise PropagatedError(CTX_SLICE_ELEMENT, e) from e
        return b"".join(chunks)

    # ------------------------------------------------------------------
    # Recursive encoding
    # ------------------------------------------------------------------

    def _encode(self, value: Any, out: list[str]) -> None:
        node = classify(value)
        if node.is_scalar:
            out.append(format_scalar(node.kind, node.value))
            return
        _STRUCTURAL_ENCODERS[node.kind](self, node, out)

    def _encode_nil(self, node: Node, out: list[str]) -> None:
        raise NilObjectError()

    def _encode_record(self, node: Node, out: list[str]) -> None:
        record = node.value
        descriptors = field_descriptors(type(record), self.target_tag, self.ignore_value)

        out.append("{")
        for i, descriptor in enumerate(descriptors):
            if i:
                out.append(",")
            out.append(f"{quote(descriptor.output_key)}:")
            try:
                self._encode(getattr(record, descriptor.name), out)
            except MarshalError as e:
                raise PropagatedError(CTX_STRUCT_FIELD, e) from e
        out.append("}")

    def _encode_sequence(self, node: Node, out: list[str]) -> None:
        out.append("[")
        for i, item in enumerate(node.value):
            if i:
                out.append(",")
            try:
                self._encode(item, out)
            except MarshalError as e:
                raise PropagatedError(CTX_SLICE_ELEMENT, e) from e
        out.append("]")

    def _encode_mapping(self, node: Node, out: list[str]) -> None:
        # Keys are sorted by their text so output never depends on insertion order
        entries = sorted(
            ((_key_text(key), val) for key, val in node.value.items()),
            key=lambda entry: entry[0],
        )

        out.append("{")
        for i, (key, val) in enumerate(entries):
            if i:
                out.append(",")
            out.append(f"{quote(key)}:")
            try:
                self._encode(val, out)
            except MarshalError as e:
                raise PropagatedError(CTX_MAP_FIELD, e) from e
        out.append("}")

    def _encode_pointer(self, node: Node, out: list[str]) -> None:
        try:
            self._encode(node.value.target, out)
        except MarshalError as e:
            raise PropagatedError(CTX_POINTER, e) from e

    def _encode_interface(self, node: Node, out: list[str]) -> None:
        try:
            self._encode(node.value.value, out)
        except MarshalError as e:
            raise PropagatedError(CTX_INTERFACE, e) from e


def _key_text(key: Any) -> str:
    """Text form of a mapping key: strings as-is, scalars via their formatter."""
    if isinstance(key, str):
        return str.__str__(key)
    node = classify(key)
    if node.is_scalar:
        return format_scalar(node.kind, node.value)
    return str(key)


_STRUCTURAL_ENCODERS: dict[Kind, Callable[[Encoder, Node, list[str]], None]] = {
    Kind.NIL: Encoder._encode_nil,
    Kind.RECORD: Encoder._encode_record,
    Kind.SEQUENCE: Encoder._encode_sequence,
    Kind.MAPPING: Encoder._encode_mapping,
    Kind.POINTER: Encoder._encode_pointer,
    Kind.INTERFACE: Encoder._encode_interface,
}
