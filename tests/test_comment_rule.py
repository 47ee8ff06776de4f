"""End-to-end tests for the file-level comment rule."""

from pathlib import Path

from nocomments.config import RuleSet
from nocomments.rules import (
    SUPPRESSION_PUNCTUATION,
    UNAUTHORIZED_COMMENT,
    RuleContext,
    Severity,
    analyze,
    analyze_file,
)


def _context(source, rules=None, severities=None):
    return RuleContext(
        file_path=Path("src/Sample.cs"),
        content=source,
        rules=rules or RuleSet(),
        severities=severities or {},
    )


def test_copyright_header_scenario(copyright_source):
    findings = analyze(_context(copyright_source))

    assert len(findings) == 1
    finding = findings[0]
    assert finding.rule_id == "NC0001"
    assert finding.snippet == "// This should be flagged as unauthorized"
    assert finding.line == 16
    assert finding.column == 13
    assert finding.severity is Severity.WARNING
    assert finding.file_path == str(Path("src/Sample.cs"))


def test_message_lists_configured_patterns():
    source = "class A { // x\n}\n"
    finding = analyze(_context(source))[0]

    assert finding.message == (
        "Comments must use intentional markers (HUMAN:, NOTE:, INTENT:, OK:, [!]) "
        "or be TODO/HACK/FIXME patterns, or file-level license banners"
    )


def test_findings_carry_fix_proposals():
    source = "class A {\n    // explain\n}\n"
    finding = analyze(_context(source))[0]

    assert [fix.key for fix in finding.fixes] == ["NC0001.remove", "NC0001.annotate"]


def test_near_miss_suppression_reported_as_info():
    source = "class A {\n    // TODO; handle args\n    // FIXME, later\n    // TODO: fine\n}\n"
    findings = analyze(_context(source))

    assert [f.rule_id for f in findings] == ["NC0002", "NC0002"]
    assert all(f.severity is Severity.INFO for f in findings)
    assert findings[0].message == "Suppression keyword 'TODO' should be followed by ':'"
    assert findings[0].fixes[0].edit.new_text == "// TODO: handle args"


def test_severity_overrides():
    source = "class A {\n    // explain\n    // TODO; x\n}\n"
    severities = {UNAUTHORIZED_COMMENT.id: "error", SUPPRESSION_PUNCTUATION.id: "none"}

    findings = analyze(_context(source, severities=severities))

    assert [(f.rule_id, f.severity) for f in findings] == [("NC0001", Severity.ERROR)]


def test_hidden_severity_suppresses_reporting():
    source = "class A {\n    // explain\n}\n"

    assert analyze(_context(source, severities={"NC0001": "hidden"})) == []


def test_file_disable_reports_nothing():
    source = "class A {\n    // explain\n    // TODO; x\n}\n"

    assert analyze(_context(source, RuleSet(disabled_for_file=True))) == []


def test_analysis_exposes_every_verdict(copyright_source):
    analysis = analyze_file(_context(copyright_source))

    assert len(analysis.verdicts) == 7
    assert len(analysis.flagged) == 1
    assert analysis.context.anchor == copyright_source.index("using")
    assert analysis.line_of(0) == 1


def test_position_handles_crlf():
    context = _context("a\r\nb\rc\nd")

    assert context.position(0) == (1, 1)
    assert context.position(3) == (2, 1)
    assert context.position(5) == (3, 1)
    assert context.position(7) == (4, 1)


def test_finding_to_dict():
    source = "class A { // x\n}\n"
    payload = analyze(_context(source))[0].to_dict()

    assert payload["rule"] == "NC0001"
    assert payload["severity"] == "warning"
    assert payload["verdict"] == "Flagged"
    assert payload["fixes"][0]["kind"] == "remove"
    assert (payload["line"], payload["column"]) == (1, 11)


def test_rust_comment_after_lifetime_is_reported():
    context = RuleContext(
        file_path=Path("src/lib.rs"),
        content="fn f(x: &'a str) { // stray remark\n}\n",
    )

    assert [f.snippet for f in analyze(context)] == ["// stray remark"]
