"""nocomments - classify source comments and rewrite unauthorized ones."""

__version__ = "1.0.0"

from nocomments.blocks import resolve_blocks
from nocomments.classifier import classify, classify_file
from nocomments.config import DEFAULT_RULES, RuleSet, resolve
from nocomments.models import (
    CommentBlock,
    CommentKind,
    CommentSpan,
    FileContext,
    Trivia,
    TriviaKind,
    Verdict,
    VerdictCategory,
)
from nocomments.rewriter import Fix, FixKind, TextEdit, annotate, is_normalizable, normalize, propose_fixes
from nocomments.tokenizer import TokenizedSource, tokenize

__all__ = [
    "__version__",
    "CommentBlock",
    "CommentKind",
    "CommentSpan",
    "DEFAULT_RULES",
    "FileContext",
    "Fix",
    "FixKind",
    "RuleSet",
    "TextEdit",
    "TokenizedSource",
    "Trivia",
    "TriviaKind",
    "Verdict",
    "VerdictCategory",
    "annotate",
    "classify",
    "classify_file",
    "is_normalizable",
    "normalize",
    "propose_fixes",
    "resolve",
    "resolve_blocks",
    "tokenize",
]
