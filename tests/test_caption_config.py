from __future__ import annotations

from pathlib import Path

import pytest

from pdfcaptions.config import (
    DEFAULT_FILTER_NAMES,
    DEFAULT_TRANSLATIONS,
    CaptionConfig,
    LanguageCues,
    load_config,
    translations_with,
)


def test_default_config_file_matches_builtin_defaults():
    config = load_config()
    assert config.to_dict() == CaptionConfig().to_dict()
    assert config.resolve.filters == DEFAULT_FILTER_NAMES


def test_load_config_from_yaml(tmp_path: Path):
    path = tmp_path / "captions.yaml"
    path.write_text(
        "\n".join(
            [
                "scan:",
                "  language: pl",
                "  tables_only: true",
                "  extra_translations:",
                "    pl:",
                "      figure: 'Rysunek|Rys\\.?'",
                "      table: 'Tabela'",
                "resolve:",
                "  filters: [Colon Only, Bold Only]",
                "report:",
                "  max_kept: 1",
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.scan.language == "pl"
    assert config.scan.tables_only is True
    assert config.scan.translations["pl"] == LanguageCues(figure=r"Rysunek|Rys\.?", table="Tabela")
    assert config.scan.translations["en"] is DEFAULT_TRANSLATIONS["en"]
    assert config.resolve.filters == ("Colon Only", "Bold Only")
    assert config.report.max_kept == 1
    assert config.report.verbose is False


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_non_mapping_yaml(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_translation_table_is_immutable():
    with pytest.raises(TypeError):
        DEFAULT_TRANSLATIONS["xx"] = LanguageCues(figure="X", table="Y")  # type: ignore[index]
    assert translations_with(None) is DEFAULT_TRANSLATIONS
    with pytest.raises(ValueError):
        translations_with({"xx": "Figure"})
