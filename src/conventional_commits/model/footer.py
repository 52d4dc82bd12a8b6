"""
Data model for a single commit message footer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .footer_separator import FooterSeparator


@dataclass(frozen=True)
class Footer:
    """One ``token<separator>value`` line of a commit's footer section.

    ``Footer()`` builds a placeholder with an empty token and value and the
    default separator. Nothing is validated: an empty token is accepted.

    Attributes
    ----------
    token : str
        The footer word token, e.g. ``Signed-off-by`` or ``Fixes``.
    separator : FooterSeparator
        How the token and value are joined.
    value : str
        The footer's value.
    """

    token: str = ""
    separator: FooterSeparator = field(default_factory=FooterSeparator.default)
    value: str = ""
