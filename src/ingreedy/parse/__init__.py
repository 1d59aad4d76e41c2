"""Grammar-driven recognition and interpretation of ingredient lines."""

from ingreedy.parse.combine import (
    MultipartPolicy,
    QuantityExpression,
    combine_fragments,
    merge_alternatives,
)
from ingreedy.parse.driver import ParseOptions, parse
from ingreedy.parse.fragments import Fragment, FragmentKind

__all__ = [
    "Fragment",
    "FragmentKind",
    "MultipartPolicy",
    "ParseOptions",
    "QuantityExpression",
    "combine_fragments",
    "merge_alternatives",
    "parse",
]
