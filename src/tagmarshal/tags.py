"""
Field tags for dataclass records.

A tag is a per-field string annotation read by tag name. Tags live in the
dataclass field metadata under TAGS_METADATA_KEY:

    @dataclass
    class MyStruct:
        field: str = tagged(json="api_field", custom="custom_field")
        ignored: str = tagged(json="ignored", custom="-")

Marshalling MyStruct with target tag "custom" and ignore value "-" emits
{"custom_field":...} and drops `ignored`.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Optional

from loguru import logger

TAGS_METADATA_KEY = "tags"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    A record field that survives ignore filtering.

    Attributes:
        name: Attribute name on the record
        output_key: Key emitted for the field (its tag value)
    """

    name: str
    output_key: str


def tagged(
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    tags: Optional[Mapping[str, str]] = None,
    **named_tags: str,
) -> Any:
    """
    Declare a dataclass field carrying tags.

    Args:
        default: Field default value
        default_factory: Field default factory
        tags: Tags whose names are not valid Python identifiers
        **named_tags: Tags given as tag_name="value"

    Returns:
        A dataclasses.field with the tags in its metadata

    Example:
        >>> @dataclass
        ... class Reading:
        ...     value: float = tagged(custom="temp", tags={"x-db": "temp_c"})
    """
    merged: dict[str, str] = dict(tags or {})
    merged.update(named_tags)
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={TAGS_METADATA_KEY: MappingProxyType(merged)},
    )


def tag_of(field: dataclasses.Field, target_tag: str) -> str:
    """Value of a field's tag, or "" when the field has no such tag."""
    tags = field.metadata.get(TAGS_METADATA_KEY) or {}
    return tags.get(target_tag, "")


@lru_cache(maxsize=None)
def field_descriptors(
    cls: type, target_tag: str, ignore_value: str
) -> tuple[FieldDescriptor, ...]:
    """
    Build the descriptor table of a dataclass for one tag configuration.

    Fields keep declaration order. A field whose tag value equals
    ignore_value is left out. Tables are cached per
    (cls, target_tag, ignore_value).

    Args:
        cls: Dataclass type
        target_tag: Tag name selecting output keys
        ignore_value: Tag value that suppresses a field

    Returns:
        Tuple of FieldDescriptor in declaration order

    Raises:
        TypeError: If cls is not a dataclass
    """
    descriptors = []
    for field in dataclasses.fields(cls):
        tag_value = tag_of(field, target_tag)
        if tag_value == ignore_value:
            continue
        descriptors.append(FieldDescriptor(name=field.name, output_key=tag_value))

    logger.debug(
        f"Built descriptor table for {cls.__qualname__} "
        f"(tag={target_tag!r}): {len(descriptors)} field(s)"
    )
    return tuple(descriptors)
