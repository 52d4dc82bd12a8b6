"""
Separators that join a footer's token and value.

A conventional commit footer is written either as ``token: value`` or as
``token #value``. :class:`FooterSeparator` models exactly those two
choices and converts them to and from their literal text.
"""

from __future__ import annotations

from enum import Enum


#: The ``:<space>`` separator.
SEPARATOR_COLON = ": "

#: The ``<space>#`` separator, mostly used with issue or PR numbers.
SEPARATOR_HASHTAG = " #"


class UnrecognizedSeparator(ValueError):
    """Raised when text is not one of the known footer separators."""

    def __init__(self, text: object) -> None:
        super().__init__(f"footer separator not recognized: {text!r}")
        self.text = text


class FooterSeparator(Enum):
    """The separator between the token and the value of a footer.

    Members
    -------
    COLON_SPACE
        ``": "``, used for descriptive footers such as
        ``Reviewed-by: alice``.
    SPACE_HASHTAG
        ``" #"``, used for issue and PR references such as ``Fixes #123``.
    """

    COLON_SPACE = SEPARATOR_COLON
    SPACE_HASHTAG = SEPARATOR_HASHTAG

    @classmethod
    def default(cls) -> "FooterSeparator":
        """Return the separator used when none is given (``COLON_SPACE``)."""
        return cls.COLON_SPACE

    @classmethod
    def parse(cls, text: str) -> "FooterSeparator":
        """Return the separator whose literal text is exactly ``text``.

        Parameters
        ----------
        text : str
            The literal separator, e.g. ``": "``. No trimming or case
            folding is applied.

        Returns
        -------
        FooterSeparator
            The matching member.

        Raises
        ------
        UnrecognizedSeparator
            If ``text`` is anything other than ``": "`` or ``" #"``.
        """
        if isinstance(text, str):
            for member in cls:
                if member.value == text:
                    return member
        raise UnrecognizedSeparator(text)

    def to_text(self) -> str:
        """Return the literal text of this separator."""
        return self.value

    def __str__(self) -> str:
        return self.value
