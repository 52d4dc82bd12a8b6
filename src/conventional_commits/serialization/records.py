"""
Conversion between the commit model and plain records.

A record is built only from ``dict``, ``list``, ``str``, ``bool`` and
``None`` so that it can be handed to any structured format (JSON, YAML,
message queues, ...). Field names are the attribute names of the model
classes. The separator is written either by member name
(``"COLON_SPACE"``) or by its literal text (``": "``), depending on the
:class:`SeparatorStyle` in use.

Decoding validates the shape of the record and raises
:class:`SerializationError` on the first problem found.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from conventional_commits.model.commit import Commit
from conventional_commits.model.footer import Footer
from conventional_commits.model.footer_separator import FooterSeparator, UnrecognizedSeparator


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when no handlers are
# configured on the root logger.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class SerializationError(Exception):
    """Raised when a record cannot be converted into a model instance."""

    pass


class SeparatorStyle(Enum):
    """How a :class:`FooterSeparator` is written into a record."""

    NAME = "name"
    TEXT = "text"


_COMMIT_FIELDS = ("type", "scope", "description", "body", "is_breaking_change", "footers")
_FOOTER_FIELDS = ("token", "separator", "value")


def separator_to_record(separator: FooterSeparator, style: SeparatorStyle = SeparatorStyle.NAME) -> str:
    """Encode a separator by name or by literal text."""
    if style is SeparatorStyle.TEXT:
        return separator.to_text()
    return separator.name


def separator_from_record(data: Any, style: Optional[SeparatorStyle] = SeparatorStyle.NAME) -> FooterSeparator:
    """Decode a separator written with ``style``.

    Parameters
    ----------
    data : Any
        The encoded separator.
    style : Optional[SeparatorStyle]
        The expected encoding. ``None`` accepts both the member name and
        the literal text.

    Raises
    ------
    SerializationError
        If ``data`` is not a separator encoded in an accepted style.
    """
    if not isinstance(data, str):
        raise _fail(f"separator must be a string, got {type(data).__name__}")
    if style is not SeparatorStyle.TEXT and data in FooterSeparator.__members__:
        return FooterSeparator[data]
    if style is not SeparatorStyle.NAME:
        try:
            return FooterSeparator.parse(data)
        except UnrecognizedSeparator as exc:
            raise _fail(str(exc)) from exc
    raise _fail(f"unknown separator name: {data!r}")


def footer_to_record(footer: Footer, style: SeparatorStyle = SeparatorStyle.NAME) -> Dict[str, Any]:
    return {
        "token": footer.token,
        "separator": separator_to_record(footer.separator, style),
        "value": footer.value,
    }


def footer_from_record(data: Any, style: Optional[SeparatorStyle] = SeparatorStyle.NAME) -> Footer:
    """Build a :class:`Footer` from a record.

    ``token`` and ``value`` are required; a missing ``separator`` falls
    back to :meth:`FooterSeparator.default`.
    """
    record = _require_mapping(data, "footer", _FOOTER_FIELDS)
    token = _require_str(record, "token", "footer")
    value = _require_str(record, "value", "footer")
    if "separator" in record:
        separator = separator_from_record(record["separator"], style)
    else:
        separator = FooterSeparator.default()
    return Footer(token, separator, value)


def commit_to_record(commit: Commit, style: SeparatorStyle = SeparatorStyle.NAME) -> Dict[str, Any]:
    """Encode a :class:`Commit` as a record, keeping footer order."""
    return {
        "type": commit.type,
        "scope": commit.scope,
        "description": commit.description,
        "body": commit.body,
        "is_breaking_change": commit.is_breaking_change,
        "footers": [footer_to_record(footer, style) for footer in commit.footers],
    }


def commit_from_record(data: Any, style: Optional[SeparatorStyle] = SeparatorStyle.NAME) -> Commit:
    """Build a :class:`Commit` from a record.

    ``type`` and ``description`` are required. ``scope`` and ``body`` may
    be missing or ``null``, ``is_breaking_change`` defaults to ``False``
    and ``footers`` to an empty list.

    Raises
    ------
    SerializationError
        If the record is not an object, has unknown keys, lacks a
        required key or holds a value of the wrong type.
    """
    record = _require_mapping(data, "commit", _COMMIT_FIELDS)
    commit_type = _require_str(record, "type", "commit")
    description = _require_str(record, "description", "commit")
    scope = _optional_str(record, "scope")
    body = _optional_str(record, "body")

    is_breaking_change = record.get("is_breaking_change", False)
    if not isinstance(is_breaking_change, bool):
        raise _fail("commit field 'is_breaking_change' must be a boolean")

    raw_footers = record.get("footers", [])
    if not isinstance(raw_footers, list):
        raise _fail("commit field 'footers' must be a list")
    footers: List[Footer] = [footer_from_record(item, style) for item in raw_footers]

    return Commit(commit_type, scope, description, body, is_breaking_change, footers)


def _fail(message: str) -> SerializationError:
    logger.error("Invalid record: %s", message)
    return SerializationError(message)


def _require_mapping(data: Any, kind: str, allowed: tuple) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise _fail(f"{kind} must be an object, got {type(data).__name__}")
    unknown = sorted(str(key) for key in data if key not in allowed)
    if unknown:
        raise _fail(f"unknown {kind} fields: {', '.join(unknown)}")
    return data


def _require_str(record: Mapping[str, Any], key: str, kind: str) -> str:
    if key not in record:
        raise _fail(f"{kind} is missing required field '{key}'")
    value = record[key]
    if not isinstance(value, str):
        raise _fail(f"{kind} field '{key}' must be a string")
    return value


def _optional_str(record: Mapping[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    if value is not None and not isinstance(value, str):
        raise _fail(f"commit field '{key}' must be a string or null")
    return value
