"""
JSON and XML encoding for enums.

Backed enums encode as name/value pairs, pure enums as the list of names.
Empty enums have nothing to encode and give None.
"""

import json
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, Optional

from . import views
from .config import get_config
from .data_types import EnumLike, SerializationFormat, SerializationResult
from .errors import EmptyEnumError, SerializationError

logger = logging.getLogger(__name__)

# Characters XML 1.0 cannot carry, even escaped
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _nesting_depth(data: Any) -> int:
    if isinstance(data, dict):
        return 1 + max((_nesting_depth(v) for v in data.values()), default=0)
    if isinstance(data, (list, tuple)):
        return 1 + max((_nesting_depth(v) for v in data), default=0)
    return 0


def encode_json(
    enum_class: EnumLike,
    ensure_ascii: Optional[bool] = None,
    indent: Optional[int] = None,
    sort_keys: bool = False,
    depth: Optional[int] = None,
) -> Optional[str]:
    """
    Encode the enum as JSON, raising on failure.

    Args:
        ensure_ascii: Escape non-ASCII characters (config default when None)
        indent: Indentation level (config default when None)
        sort_keys: Sort object keys
        depth: Maximum nesting depth (config default when None)

    Returns:
        JSON text, or None for an empty enum

    Raises:
        SerializationError: If the data is nested deeper than ``depth`` or
            the encoder rejects it
    """
    config = get_config()
    data = views.as_dict(enum_class)
    if not data:
        return None

    max_depth = config.json_depth if depth is None else depth
    actual_depth = _nesting_depth(data)
    if actual_depth > max_depth:
        raise SerializationError(
            f"Maximum depth {max_depth} exceeded (data depth {actual_depth})",
            SerializationFormat.JSON.value,
        )

    try:
        return json.dumps(
            data,
            ensure_ascii=config.json_ensure_ascii if ensure_ascii is None else ensure_ascii,
            indent=config.json_indent if indent is None else indent,
            sort_keys=sort_keys,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"JSON encoding failed: {e}", SerializationFormat.JSON.value, e
        ) from e


def to_json(
    enum_class: EnumLike,
    ensure_ascii: Optional[bool] = None,
    indent: Optional[int] = None,
    sort_keys: bool = False,
    depth: Optional[int] = None,
) -> Optional[str]:
    """Encode the enum as JSON. Returns None for an empty enum or when encoding fails."""
    try:
        return encode_json(enum_class, ensure_ascii, indent, sort_keys, depth)
    except SerializationError as e:
        logger.warning(f"Could not encode {views.enum_name(enum_class)} as JSON: {e.message}")
        return None


def _check_xml_text(text: str) -> str:
    match = _ILLEGAL_XML_CHARS.search(text)
    if match:
        raise ValueError(f"character {match.group()!r} is not allowed in XML")
    return text


def to_xml(enum_class: EnumLike) -> Optional[str]:
    """
    Encode the enum as XML under an ``<enum>`` root.

    Backed members become ``<NAME>value</NAME>``, pure members
    ``<name>NAME</name>``. Markup characters in values are escaped.

    Returns:
        XML text, or None for an empty enum

    Raises:
        SerializationError: If a value cannot be represented in XML
    """
    if views.is_empty(enum_class):
        return None

    config = get_config()
    root = ET.Element(config.xml_root)
    try:
        if views.is_backed(enum_class):
            for member in views.get_all(enum_class):
                child = ET.SubElement(root, _check_xml_text(member.name))
                child.text = _check_xml_text(views.as_text(member.value))
        else:
            for name in views.names(enum_class):
                ET.SubElement(root, "name").text = _check_xml_text(name)

        byte_encoding = config.xml_encoding != "unicode"
        encoded = ET.tostring(
            root, encoding=config.xml_encoding, xml_declaration=byte_encoding
        )
        if isinstance(encoded, bytes):
            encoded = encoded.decode(config.xml_encoding)
        return encoded
    except (TypeError, ValueError, LookupError) as e:
        logger.error(f"XML encoding of {views.enum_name(enum_class)} failed: {e}")
        raise SerializationError(
            f"XML encoding failed: {e}", SerializationFormat.XML.value, e
        ) from e


def serialize(enum_class: EnumLike, format: str = "json", **options) -> SerializationResult:
    """
    Encode the enum and report the outcome as a result object.

    An empty enum has nothing to encode and gives a failure result carrying
    an ``EmptyEnumError``.

    Args:
        format: "json" or "xml"
        **options: Passed to ``encode_json`` for JSON

    Raises:
        ValueError: If the format is not supported
    """
    fmt = SerializationFormat(format)
    try:
        if fmt is SerializationFormat.JSON:
            data = encode_json(enum_class, **options)
        else:
            data = to_xml(enum_class)
    except SerializationError as e:
        return SerializationResult.from_exception(fmt, e)
    if data is None:
        return SerializationResult.from_exception(
            fmt, EmptyEnumError(views.enum_name(enum_class), f"serialize as {fmt.value}")
        )
    return SerializationResult.ok(fmt, data)
