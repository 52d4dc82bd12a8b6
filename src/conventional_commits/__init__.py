"""
Top-level package for conventional_commits.

Data structures for working with conventional commit messages, modelled
on the v1.0.0 specification at https://www.conventionalcommits.org/.
The command line entry point lives in ``conventional_commits.cli``.
"""

__version__ = "0.1.0"

from conventional_commits.model import (  # noqa: E402
    SEPARATOR_COLON,
    SEPARATOR_HASHTAG,
    Commit,
    Footer,
    FooterSeparator,
    UnrecognizedSeparator,
)

__all__ = [
    "Commit",
    "Footer",
    "FooterSeparator",
    "SEPARATOR_COLON",
    "SEPARATOR_HASHTAG",
    "UnrecognizedSeparator",
    "__version__",
]
