"""Tests for the multi-file runner: reading sources and applying fixes."""

import pytest

from nocomments.config_runtime import load_project_config
from nocomments.pipeline.runner import fix_path, read_source, run_check, run_fix
from nocomments.rewriter import FixKind


@pytest.fixture
def latin1_file(tmp_path):
    path = tmp_path / "Latin.cs"
    path.write_bytes('class A {\n    string s = "caf\xe9"; // stray\n}\n'.encode("latin-1"))
    return path


def test_non_utf8_source_is_rejected(latin1_file):
    with pytest.raises(UnicodeDecodeError):
        read_source(latin1_file)


def test_fix_leaves_non_utf8_file_untouched(tmp_path, latin1_file):
    original = latin1_file.read_bytes()

    results = run_fix([tmp_path], load_project_config(tmp_path), FixKind.REMOVE)

    assert results == []
    assert latin1_file.read_bytes() == original


def test_check_skips_non_utf8_file(tmp_path, latin1_file):
    summary = run_check([tmp_path], load_project_config(tmp_path))

    assert summary.analyses == []
    assert len(summary.skipped) == 1
    assert summary.skipped[0][0].endswith("Latin.cs")


def test_adjacent_removals_on_one_line_are_merged(tmp_path):
    path = tmp_path / "A.cs"
    path.write_text(
        "class A {\n    /* a */ /* b */\n    int x; /* c */ /* d */\n}\n", encoding="utf-8"
    )

    result = fix_path(path, load_project_config(tmp_path), FixKind.REMOVE)

    assert result.updated == "class A {\n    int x;\n}\n"
    assert result.applied == 2
    assert path.read_text(encoding="utf-8") == result.updated


def test_remove_does_not_fuse_tokens(tmp_path):
    path = tmp_path / "B.cs"
    path.write_text("class B {\n    int F() { return/* why */x; }\n}\n", encoding="utf-8")

    result = fix_path(path, load_project_config(tmp_path), FixKind.REMOVE, write=False)

    assert result.updated == "class B {\n    int F() { return x; }\n}\n"
    assert path.read_text(encoding="utf-8") == result.original
