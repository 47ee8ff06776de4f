"""Trivia tokenizer for C-family sources.

Turns raw text into the positioned trivia sequence the block resolver and
classifier consume, and locates the declaration anchor. This is a lexical
scan, not a parser: it only needs to tell comments apart from string
literals and code.
"""

import re
from dataclasses import dataclass

from nocomments.models import CommentKind, CommentSpan, Trivia, TriviaKind

DECLARATION_KEYWORDS = frozenset(
    {
        "namespace",
        "using",
        "import",
        "package",
        "class",
        "interface",
        "struct",
        "enum",
        "record",
        "delegate",
    }
)

INCLUDE_DIRECTIVES = frozenset({"include", "import"})

# Languages where a lone `'` is a lifetime or label rather than a literal
LIFETIME_SUFFIXES = frozenset({".rs"})

_WORD_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_SPACE = " \t\f\v\ufeff"
_STATEMENT_END = ";{}"


@dataclass(frozen=True)
class TokenizedSource:
    """Everything the engine needs to know about one file's layout."""

    trivia: tuple[Trivia, ...]
    comments: tuple[CommentSpan, ...]
    anchor: int | None


def _skip_string(text: str, i: int) -> int:
    """Return the offset just past the literal starting at `i`."""
    n = len(text)
    quote = text[i]

    # C# verbatim (@"..." / $@"..." / @$"...) doubles quotes instead of escaping
    if quote == "@" or (quote == "$" and i + 1 < n and text[i + 1] == "@"):
        j = text.index('"', i)
        j += 1
        while j < n:
            if text[j] == '"':
                if j + 1 < n and text[j + 1] == '"':
                    j += 2
                    continue
                return j + 1
            j += 1
        return n

    if quote == "$":
        i += 1
        quote = text[i]

    # Triple-quoted raw strings (C# 11, Kotlin, Swift, Scala)
    if text.startswith(quote * 3, i) and quote == '"':
        end = text.find('"""', i + 3)
        return n if end < 0 else end + 3

    j = i + 1
    while j < n:
        ch = text[j]
        if ch == "\\":
            j += 2
            continue
        if ch == quote:
            return j + 1
        if ch in "\r\n" and quote != "`":
            # Unterminated literal ends at the line break
            return j
        j += 1
    return n


def _is_string_start(text: str, i: int) -> bool:
    ch = text[i]
    if ch in "\"'`":
        return True
    if ch == "@" and (text.startswith('@"', i) or text.startswith('@$"', i)):
        return True
    if ch == "$" and (text.startswith('$"', i) or text.startswith('$@"', i)):
        return True
    return False


def _char_literal_end(text: str, i: int) -> int | None:
    """End of a character literal at `i` (`'x'`, `'\\n'`, `'\\u{1F600}'`), else None."""
    n = len(text)
    if i + 2 < n and text[i + 1] not in "\\'\r\n" and text[i + 2] == "'":
        return i + 3
    if i + 1 < n and text[i + 1] == "\\":
        j = i + 2
        while j < min(n, i + 14) and text[j] not in "\r\n":
            if text[j] == "'" and j > i + 2:
                return j + 1
            j += 1
    return None


def _comment_at(text: str, i: int) -> tuple[int, CommentKind] | None:
    """Return (end, kind) if a comment starts at `i`."""
    if not text.startswith("/", i) or i + 1 >= len(text):
        return None
    nxt = text[i + 1]
    if nxt == "/":
        end = i + 2
        while end < len(text) and text[end] not in "\r\n":
            end += 1
        is_doc = text.startswith("///", i) and not text.startswith("////", i)
        return end, CommentKind.DOC if is_doc else CommentKind.LINE
    if nxt == "*":
        close = text.find("*/", i + 2)
        end = len(text) if close < 0 else close + 2
        is_doc = text.startswith("/**", i) and not text.startswith("/**/", i)
        return end, CommentKind.DOC if is_doc else CommentKind.BLOCK
    return None


def tokenize(text: str, lifetimes: bool = False) -> TokenizedSource:
    """Split `text` into trivia, comment spans and the declaration anchor.

    With `lifetimes`, a `'` that does not open a short character literal is
    code (Rust `&'a str`, `'outer: loop`).
    """
    trivia: list[Trivia] = []
    comments: list[CommentSpan] = []
    anchor: int | None = None

    n = len(text)
    i = 0
    code_start: int | None = None
    statement_start: int | None = None
    at_line_start = True

    def flush_code(upto: int) -> None:
        nonlocal code_start
        if code_start is not None and upto > code_start:
            trivia.append(Trivia(TriviaKind.CODE, code_start, upto))
        code_start = None

    while i < n:
        ch = text[i]

        if ch in _SPACE:
            flush_code(i)
            j = i
            while j < n and text[j] in _SPACE:
                j += 1
            trivia.append(Trivia(TriviaKind.WHITESPACE, i, j))
            i = j
            continue

        if ch in "\r\n":
            flush_code(i)
            j = i + 2 if text.startswith("\r\n", i) else i + 1
            trivia.append(Trivia(TriviaKind.END_OF_LINE, i, j))
            i = j
            at_line_start = True
            continue

        found = _comment_at(text, i)
        if found is not None:
            flush_code(i)
            end, kind = found
            span = CommentSpan(i, end, kind, text[i:end])
            comments.append(span)
            trivia_kind = TriviaKind.DOC_COMMENT if kind is CommentKind.DOC else TriviaKind.COMMENT
            trivia.append(Trivia(trivia_kind, i, end, span))
            at_line_start = False
            i = end
            continue

        if code_start is None:
            code_start = i

        if ch == "#" and at_line_start:
            # Preprocessor directive: the rest of the line is code
            k = i + 1
            while k < n and text[k] in _SPACE:
                k += 1
            directive = _WORD_RE.match(text, k)
            if anchor is None and directive and directive.group(0) in INCLUDE_DIRECTIVES:
                anchor = i
            j = i
            while j < n and text[j] not in "\r\n":
                if _comment_at(text, j) is not None:
                    break
                j += 1
            at_line_start = False
            i = j
            continue

        at_line_start = False

        if ch == "'" and lifetimes:
            if statement_start is None:
                statement_start = i
            end = _char_literal_end(text, i)
            i = i + 1 if end is None else end
            continue

        if _is_string_start(text, i):
            if statement_start is None:
                statement_start = i
            i = _skip_string(text, i)
            continue

        if ch in _STATEMENT_END:
            statement_start = None
            i += 1
            continue

        if statement_start is None:
            statement_start = i

        match = _WORD_RE.match(text, i)
        if match:
            if anchor is None and match.group(0) in DECLARATION_KEYWORDS:
                anchor = statement_start
            i = match.end()
            continue

        i += 1

    flush_code(n)
    return TokenizedSource(tuple(trivia), tuple(comments), anchor)
