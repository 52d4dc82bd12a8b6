"""
Structured serialization for the commit model.

The model classes know nothing about serialization formats. This package
converts them to plain records (:mod:`conventional_commits.serialization.records`)
and to JSON (:mod:`conventional_commits.serialization.json_serializer`).
"""

from .json_serializer import CommitSerializer, JsonSerializer  # noqa: F401
from .records import (  # noqa: F401
    SeparatorStyle,
    SerializationError,
    commit_from_record,
    commit_to_record,
    footer_from_record,
    footer_to_record,
    separator_from_record,
    separator_to_record,
)
