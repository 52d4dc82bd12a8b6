"""
Data model for a conventional commit message.

The :class:`Commit` mirrors the structure laid out by the conventional
commits v1.0.0 specification: a mandatory type and description, an
optional scope and body, a breaking change flag and ``0..n`` footers.
The sections of the message are separated by an empty line::

    feat(some scope): a short and concise description

    This is a longer body message. It can be wrapped around
    and be put onto multiple lines.

    Fixes #123
    PR-close #124
    Signed-off-by: SirWindfield

Turning that text into a :class:`Commit` (and back) is left to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .footer import Footer


@dataclass(frozen=True)
class Commit:
    """Representation of one commit message.

    ``Commit()`` builds an empty placeholder. Instances are immutable; use
    :func:`dataclasses.replace` to derive a modified copy.

    Attributes
    ----------
    type : str
        The commit type (feat, fix, docs, etc.).
    scope : Optional[str]
        The scope narrowing the type. ``None`` means no scope was given.
    description : str
        The short summary on the first line of the message.
    body : Optional[str]
        The free-form body, ``None`` when the message has none.
    is_breaking_change : bool
        Set if the commit introduces a breaking change.
    footers : Tuple[Footer, ...]
        The footers in the order they appear. Any iterable is accepted and
        copied into a tuple, so the caller's sequence can be reused freely.
    """

    type: str = ""
    scope: Optional[str] = None
    description: str = ""
    body: Optional[str] = None
    is_breaking_change: bool = False
    footers: Tuple[Footer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store our own copy.
        object.__setattr__(self, "footers", tuple(self.footers))
