"""
JSON serialization of commits.

:class:`JsonSerializer` writes a :class:`Commit` as a JSON object built by
:func:`conventional_commits.serialization.records.commit_to_record` and
reads it back. Any object with the same ``dumps``/``loads`` methods
satisfies :class:`CommitSerializer` and can be used in its place.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Optional, Protocol, Union, runtime_checkable

from conventional_commits.model.commit import Commit
from conventional_commits.serialization.records import (
    SeparatorStyle,
    SerializationError,
    commit_from_record,
    commit_to_record,
)


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@runtime_checkable
class CommitSerializer(Protocol):
    """Protocol for pluggable commit serialization formats."""

    def dumps(self, commit: Commit) -> str:
        ...

    def loads(self, text: str) -> Commit:
        ...


class JsonSerializer:
    """Serialize commits to and from JSON text.

    Parameters
    ----------
    separator_style : SeparatorStyle
        How footer separators are written.
    indent : Optional[int]
        Passed to :func:`json.dumps`; ``None`` gives compact output.
    strict : bool
        When true, decoding only accepts separators written in
        ``separator_style``. When false, both styles are accepted.
    """

    def __init__(
        self,
        separator_style: SeparatorStyle = SeparatorStyle.NAME,
        indent: Optional[int] = None,
        strict: bool = True,
    ) -> None:
        self.separator_style = separator_style
        self.indent = indent
        self.strict = strict

    def dumps(self, commit: Commit) -> str:
        text = json.dumps(
            commit_to_record(commit, self.separator_style),
            indent=self.indent,
            ensure_ascii=False,
        )
        logger.debug("Serialized commit of type %r with %d footer(s)", commit.type, len(commit.footers))
        return text

    def loads(self, text: Union[str, bytes]) -> Commit:
        """Decode a commit from JSON text.

        Raises
        ------
        SerializationError
            If ``text`` is not valid JSON (including undecodable bytes and
            nesting too deep to parse) or does not describe a commit.
        """
        try:
            data = json.loads(text)
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        except (ValueError, RecursionError) as exc:
            logger.error("Failed to parse commit JSON: %s", exc)
            raise SerializationError(f"Invalid JSON: {exc}") from exc
        style = self.separator_style if self.strict else None
        commit = commit_from_record(data, style)
        logger.debug("Deserialized commit of type %r with %d footer(s)", commit.type, len(commit.footers))
        return commit

    def dump(self, commit: Commit, fp: IO[str]) -> None:
        fp.write(self.dumps(commit))

    def load(self, fp: IO[str]) -> Commit:
        try:
            text = fp.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read commit: %s", exc)
            raise SerializationError(f"Could not read input: {exc}") from exc
        return self.loads(text)
