"""Block resolver: group comment spans into maximal contiguous runs."""

from collections.abc import Iterable

from nocomments.models import CommentBlock, CommentSpan, Trivia, TriviaKind


def resolve_blocks(
    spans: Iterable[CommentSpan], trivia: Iterable[Trivia]
) -> tuple[CommentBlock, ...]:
    """Partition the non-doc comments in `spans` into contiguous blocks.

    Single linear pass over `trivia` in source order. Whitespace and line
    terminators keep the current block open; code and doc comments close it.
    Spans that never appear in `trivia` become single-span blocks at the end
    so every non-doc span belongs to exactly one block.
    """
    wanted = {span for span in spans if not span.is_doc}
    blocks: list[CommentBlock] = []
    current: list[CommentSpan] = []
    placed: set[CommentSpan] = set()

    def close() -> None:
        if current:
            blocks.append(CommentBlock(tuple(current)))
            current.clear()

    for item in trivia:
        if item.is_layout:
            continue
        if item.kind is TriviaKind.COMMENT and item.comment in wanted:
            current.append(item.comment)
            placed.add(item.comment)
            continue
        close()
    close()

    stray = sorted(wanted - placed, key=lambda span: span.start)
    if stray:
        blocks.extend(CommentBlock((span,)) for span in stray)
        blocks.sort(key=lambda block: block.start)

    return tuple(blocks)
