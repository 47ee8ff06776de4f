"""Pytest configuration and fixtures."""
import pytest

from nocomments.config import RuleSet
from nocomments.models import CommentKind, CommentSpan

COPYRIGHT_HEADER_SOURCE = """// MIT License
// Copyright (C) 2019 VIMaec LLC.
// Copyright (C) 2018 Ara 3D. Inc
// Copyright (C) The Mono.Xna Team
// This file is subject to the terms and conditions defined in
// file 'LICENSE.txt', which is part of this source code package.

using System;

namespace TestNamespace
{
    public class TestClass
    {
        public void TestMethod()
        {
            // This should be flagged as unauthorized
            Console.WriteLine("Hello");
        }
    }
}
"""


@pytest.fixture
def rules():
    """Default rule set."""
    return RuleSet()


@pytest.fixture
def copyright_source():
    return COPYRIGHT_HEADER_SOURCE


def _make_span(text: str, start: int = 0, kind: CommentKind | None = None) -> CommentSpan:
    if kind is None:
        kind = CommentKind.LINE if text.startswith("//") else CommentKind.BLOCK
    return CommentSpan(start, start + len(text), kind, text)


@pytest.fixture
def make_span():
    """Factory for standalone comment spans."""
    return _make_span


@pytest.fixture
def sample_project(tmp_path):
    """Minimal C# project with one flagged comment and a license header."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "Program.cs").write_text(
        "// Copyright (c) 2025 Test Company\n"
        "\n"
        "using System;\n"
        "\n"
        "namespace Demo\n"
        "{\n"
        "    public class Program\n"
        "    {\n"
        "        public static void Main()\n"
        "        {\n"
        "            // print a greeting\n"
        '            Console.WriteLine("Hello");\n'
        "            // TODO; handle args\n"
        "        }\n"
        "    }\n"
        "}\n",
        encoding="utf-8",
    )
    (src / "Clean.cs").write_text(
        "namespace Demo\n"
        "{\n"
        "    /// <summary>Documented.</summary>\n"
        "    public class Clean\n"
        "    {\n"
        "        // HUMAN: kept on purpose\n"
        "        public int X;\n"
        "    }\n"
        "}\n",
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("// not a source file\n", encoding="utf-8")
    return tmp_path
