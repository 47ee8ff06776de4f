"""Comment model shared by the block resolver, classifier and rewriter.

All types here are immutable values derived fresh for each analysis pass.
"""

from dataclasses import dataclass, field
from enum import Enum


class CommentKind(Enum):
    """Lexical comment forms."""

    LINE = "line"
    BLOCK = "block"
    DOC = "doc"


class TriviaKind(Enum):
    """Coarse kind tag for every run of source text."""

    COMMENT = "comment"
    DOC_COMMENT = "doc_comment"
    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    CODE = "code"


@dataclass(frozen=True)
class CommentSpan:
    """One lexical comment: half-open offsets plus raw text with delimiters."""

    start: int
    end: int
    kind: CommentKind
    text: str

    @property
    def is_doc(self) -> bool:
        return self.kind is CommentKind.DOC


@dataclass(frozen=True)
class Trivia:
    """A positioned run of source text; comments carry their span."""

    kind: TriviaKind
    start: int
    end: int
    comment: CommentSpan | None = None

    @property
    def is_layout(self) -> bool:
        """Whitespace and line terminators never split a comment block."""
        return self.kind in (TriviaKind.WHITESPACE, TriviaKind.END_OF_LINE)


@dataclass(frozen=True)
class CommentBlock:
    """Maximal run of non-doc comments separated only by layout trivia."""

    spans: tuple[CommentSpan, ...]

    @property
    def start(self) -> int:
        return self.spans[0].start

    @property
    def end(self) -> int:
        return self.spans[-1].end

    def __contains__(self, span: object) -> bool:
        return span in self.spans

    def __len__(self) -> int:
        return len(self.spans)


class VerdictCategory(Enum):
    """Reason a comment is authorized."""

    DOC = "doc"
    FILE_DISABLED = "file_disabled"
    INLINE_DISABLED = "inline_disabled"
    MARKER = "marker"
    SUPPRESSION = "suppression"
    LICENSE_BANNER = "license_banner"


@dataclass(frozen=True)
class Verdict:
    """Allowed(category) when `category` is set, Flagged otherwise."""

    category: VerdictCategory | None = None

    @classmethod
    def allowed(cls, category: VerdictCategory) -> "Verdict":
        return cls(category)

    @classmethod
    def flagged(cls) -> "Verdict":
        return cls(None)

    @property
    def is_flagged(self) -> bool:
        return self.category is None

    @property
    def is_allowed(self) -> bool:
        return self.category is not None

    def __str__(self) -> str:
        if self.category is None:
            return "Flagged"
        return f"Allowed({self.category.value})"


FLAGGED = Verdict.flagged()


@dataclass(frozen=True)
class FileContext:
    """Per-file facts the classifier consults besides the comment itself.

    `anchor` is the offset of the first namespace/import/type declaration,
    or None when the file has none (the whole file is banner-eligible).
    """

    blocks: tuple[CommentBlock, ...] = ()
    anchor: int | None = None
    _index: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        for block in self.blocks:
            for span in block.spans:
                self._index[span] = block

    def block_of(self, span: CommentSpan) -> CommentBlock:
        """Block containing `span`; a span outside every block stands alone."""
        block = self._index.get(span)
        if block is None:
            return CommentBlock((span,))
        return block
