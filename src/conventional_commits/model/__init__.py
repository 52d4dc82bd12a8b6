"""
Data model for conventional commit messages.

This package provides the :class:`Commit` and :class:`Footer` records and
the :class:`FooterSeparator` enumeration. See
:mod:`conventional_commits.model.footer_separator` for the textual
conversions of the separator.
"""

from .commit import Commit  # noqa: F401
from .footer import Footer  # noqa: F401
from .footer_separator import (  # noqa: F401
    SEPARATOR_COLON,
    SEPARATOR_HASHTAG,
    FooterSeparator,
    UnrecognizedSeparator,
)
