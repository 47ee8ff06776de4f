"""Tests for the C-family trivia tokenizer."""

from nocomments.models import CommentKind, TriviaKind
from nocomments.tokenizer import tokenize


def _comment_texts(source):
    return [c.text for c in tokenize(source).comments]


def test_comment_kinds():
    source = "/// doc\n// line\n/* block */\n/** doc block */\n/**/\n//// banner\n"
    kinds = [(c.text, c.kind) for c in tokenize(source).comments]

    assert kinds == [
        ("/// doc", CommentKind.DOC),
        ("// line", CommentKind.LINE),
        ("/* block */", CommentKind.BLOCK),
        ("/** doc block */", CommentKind.DOC),
        ("/**/", CommentKind.BLOCK),
        ("//// banner", CommentKind.LINE),
    ]


def test_line_comment_excludes_line_terminator():
    source = "int a; // trailing\r\nint b;"
    comment = tokenize(source).comments[0]

    assert comment.text == "// trailing"
    assert source[comment.start : comment.end] == comment.text


def test_comment_delimiters_inside_strings_are_code():
    source = (
        'var url = "http://example.com"; // real\n'
        "var c = '/';\n"
        'var v = @"C:\\temp\\"" /* not */";\n'
        "var t = `/* template */`;\n"
    )

    assert _comment_texts(source) == ["// real"]


def test_unterminated_block_comment_runs_to_end():
    source = "int a;\n/* never closed"
    comment = tokenize(source).comments[0]

    assert comment.kind is CommentKind.BLOCK
    assert comment.end == len(source)


def test_trivia_cover_source_in_order():
    source = "using System;  // x\n\tclass A {}\n"
    trivia = tokenize(source).trivia

    assert trivia[0].start == 0
    assert trivia[-1].end == len(source)
    for previous, current in zip(trivia, trivia[1:]):
        assert previous.end == current.start
    kinds = {t.kind for t in trivia}
    assert {TriviaKind.CODE, TriviaKind.WHITESPACE, TriviaKind.END_OF_LINE, TriviaKind.COMMENT} <= kinds


def test_anchor_is_first_using_directive():
    source = "// header\n\nusing System;\nnamespace A {}\n"

    assert tokenize(source).anchor == source.index("using")


def test_anchor_includes_modifiers_and_attributes():
    source = "// header\n[Serializable]\npublic sealed class A\n{\n}\n"

    assert tokenize(source).anchor == source.index("[Serializable]")


def test_anchor_absent_without_declarations():
    source = "// just a script\nvar x = 1;\nConsole.WriteLine(x);\n"

    assert tokenize(source).anchor is None


def test_keyword_inside_string_is_not_an_anchor():
    source = 'var s = "class";\n// later\n'

    assert tokenize(source).anchor is None


def test_include_directive_is_an_anchor():
    source = "/* Copyright 2024 */\n#include <stdio.h>\nint main() { return 0; }\n"

    assert tokenize(source).anchor == source.index("#include")


def test_preprocessor_region_is_code_not_anchor():
    source = "#region Header\n// Copyright\n#endregion\nnamespace A {}\n"
    result = tokenize(source)

    assert result.anchor == source.index("namespace")
    assert [t.kind for t in result.trivia][0] is TriviaKind.CODE


def test_empty_source():
    result = tokenize("")

    assert result.trivia == ()
    assert result.comments == ()
    assert result.anchor is None


def test_rust_lifetime_does_not_hide_comment():
    source = "fn f(x: &'a str) { // stray remark\n}\n"

    comments = tokenize(source, lifetimes=True).comments

    assert [c.text for c in comments] == ["// stray remark"]


def test_char_literals_still_skipped_with_lifetimes():
    source = "let a = '/'; let b = '\\''; let c = '\\u{2F}'; // real\nfn g<'a>() {}\n"

    comments = tokenize(source, lifetimes=True).comments

    assert [c.text for c in comments] == ["// real"]


def test_single_quoted_strings_without_lifetimes():
    source = "var u = 'see http://x'; // real\n"

    assert _comment_texts(source) == ["// real"]
