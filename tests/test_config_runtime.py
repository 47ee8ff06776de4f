"""Tests for loading settings from YAML files and the environment."""

from nocomments.config_runtime import (
    env_settings,
    find_config_file,
    load_project_config,
    load_settings,
)


def test_missing_config_file_gives_defaults(tmp_path):
    config = load_project_config(tmp_path)

    assert config.source is None
    assert config.settings == {}
    assert config.rules_for(tmp_path / "a.cs", environ={}).enable_markers


def test_top_level_settings_are_flattened(tmp_path):
    (tmp_path / ".nocomments.yml").write_text(
        "intentional_markers: [WHY, 'KEEP:']\n"
        "enable_license_banner_check: false\n"
        "severity:\n"
        "  nc0001: error\n",
        encoding="utf-8",
    )

    config = load_project_config(tmp_path)
    rules = config.rules_for(tmp_path / "a.cs", environ={})

    assert config.source == tmp_path / ".nocomments.yml"
    assert config.settings["intentional_markers"] == "WHY,KEEP:"
    assert rules.marker_patterns == ("WHY", "KEEP:")
    assert rules.enable_license_banner is False
    assert config.severities == {"NC0001": "error"}


def test_glob_overrides_apply_per_file(tmp_path):
    (tmp_path / ".nocomments.yaml").write_text(
        "files:\n"
        "  'generated/*.cs':\n"
        "    disable_for_file: true\n"
        "  '*.Designer.cs':\n"
        "    disable_for_file: true\n",
        encoding="utf-8",
    )
    config = load_project_config(tmp_path)

    assert config.rules_for("generated/Model.cs", environ={}).disabled_for_file
    assert config.rules_for("src/Form1.Designer.cs", environ={}).disabled_for_file
    assert not config.rules_for("src/Program.cs", environ={}).disabled_for_file


def test_absolute_paths_match_relative_globs(tmp_path):
    (tmp_path / ".nocomments.yml").write_text(
        "files:\n  'gen/**':\n    disable_for_file: 'yes'\n", encoding="utf-8"
    )
    config = load_project_config(tmp_path)

    assert config.rules_for(tmp_path.resolve() / "gen" / "x" / "A.cs", environ={}).disabled_for_file


def test_environment_overrides_file(tmp_path):
    (tmp_path / ".nocomments.yml").write_text("disable_for_file: true\n", encoding="utf-8")
    environ = {"NOCOMMENTS_DISABLE_FOR_FILE": "false", "NOCOMMENTS_LICENSE_PATTERNS": "MIT"}

    settings = load_settings(tmp_path / "a.cs", root=tmp_path, environ=environ)

    assert settings["disable_for_file"] == "false"
    assert settings["license_patterns"] == "MIT"


def test_env_settings_only_reads_known_keys():
    environ = {"NOCOMMENTS_ENABLE_DOC_COMMENT_CHECK": "0", "NOCOMMENTS_OTHER": "1"}

    assert env_settings(environ) == {"enable_doc_comment_check": "0"}


def test_malformed_yaml_falls_back_to_defaults(tmp_path):
    (tmp_path / ".nocomments.yml").write_text("intentional_markers: [unclosed\n", encoding="utf-8")

    config = load_project_config(tmp_path)

    assert config.settings == {}
    assert config.rules_for("a.cs", environ={}).marker_patterns[0] == "HUMAN:"


def test_non_mapping_yaml_is_ignored(tmp_path):
    (tmp_path / ".nocomments.yml").write_text("- just\n- a list\n", encoding="utf-8")

    assert load_project_config(tmp_path).settings == {}


def test_explicit_config_file(tmp_path):
    custom = tmp_path / "lint" / "comments.yml"
    custom.parent.mkdir()
    custom.write_text("suppression_patterns: 'XXX:'\n", encoding="utf-8")

    config = load_project_config(tmp_path, custom)

    assert config.rules_for("a.cs", environ={}).suppression_patterns == ("XXX:",)


def test_find_config_file_prefers_yml(tmp_path):
    (tmp_path / ".nocomments.yaml").write_text("{}\n", encoding="utf-8")
    (tmp_path / ".nocomments.yml").write_text("{}\n", encoding="utf-8")

    assert find_config_file(tmp_path).name == ".nocomments.yml"
