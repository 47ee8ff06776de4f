"""Tests for contiguous comment block resolution."""

from nocomments.blocks import resolve_blocks
from nocomments.models import CommentKind, CommentSpan, Trivia, TriviaKind
from nocomments.tokenizer import tokenize


def _blocks_for(source):
    tokens = tokenize(source)
    return resolve_blocks(tokens.comments, tokens.trivia)


def _texts(block):
    return [span.text for span in block.spans]


def test_adjacent_line_comments_form_one_block():
    blocks = _blocks_for("// one\n// two\n   // three\nint x;\n")

    assert len(blocks) == 1
    assert _texts(blocks[0]) == ["// one", "// two", "// three"]


def test_blank_lines_do_not_split_a_block():
    blocks = _blocks_for("// one\n\n\n/* two */\n")

    assert len(blocks) == 1


def test_code_splits_blocks():
    blocks = _blocks_for("// one\nint x; // two\n// three\n")

    assert [_texts(b) for b in blocks] == [["// one"], ["// two", "// three"]]


def test_doc_comments_split_blocks_and_are_excluded():
    blocks = _blocks_for("// one\n/// doc\n// two\n")

    assert [_texts(b) for b in blocks] == [["// one"], ["// two"]]
    assert all(not span.is_doc for b in blocks for span in b.spans)


def test_every_non_doc_span_in_exactly_one_block():
    source = "// a\n// b\nclass A {\n  /* c */ int x; // d\n  /// e\n}\n// f\n"
    tokens = tokenize(source)
    blocks = resolve_blocks(tokens.comments, tokens.trivia)

    members = [span for block in blocks for span in block.spans]
    expected = [c for c in tokens.comments if c.kind is not CommentKind.DOC]
    assert members == expected
    assert len(set(members)) == len(members)


def test_block_bounds():
    source = "  // a\n  // b\nx"
    block = _blocks_for(source)[0]

    assert block.start == 2
    assert block.end == source.index("// b") + len("// b")


def test_spans_missing_from_trivia_stand_alone():
    """Spans the caller supplies without trivia still get a block."""
    span = CommentSpan(10, 17, CommentKind.LINE, "// lone")
    trivia = [Trivia(TriviaKind.CODE, 0, 10)]

    blocks = resolve_blocks([span], trivia)

    assert len(blocks) == 1
    assert blocks[0].spans == (span,)


def test_empty_input():
    assert resolve_blocks([], []) == ()
