"""Configuration primitives for the caption scanner."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml


@dataclass(frozen=True, slots=True)
class LanguageCues:
    """Recognised caption cue surface forms for one language.

    ``figure`` and ``table`` are regular-expression alternations. Entries
    carrying a literal ``\\.`` are abbreviated forms.
    """

    figure: str
    table: str
    table_initial: str = "T"


ENGLISH_CUES = LanguageCues(figure=r"Figure|FIGURE|FIG\.?|Fig\.?", table=r"Table|TABLE")

DEFAULT_TRANSLATIONS: Mapping[str, LanguageCues] = MappingProxyType(
    {
        "en": ENGLISH_CUES,
        "fr": LanguageCues(figure=r"Figure|FIGURE|FIG\.?|Fig\.?", table=r"Tableau|TABLEAU"),
        "es": LanguageCues(figure=r"Figura|FIGURA|FIG\.?|Fig\.?", table=r"Tabla|TABLA"),
        "it": LanguageCues(figure=r"Figura|FIGURA|FIG\.?|Fig\.?", table=r"Tabella|TABELLA"),
        "de": LanguageCues(
            figure=r"Abbildung|ABBILDUNG|Figur|FIGUR|FIG\.?|Fig\.?|ABB\.?|Abb\.?",
            table=r"Tabelle|TABELLE",
        ),
        "pt": LanguageCues(figure=r"Figura|FIGURA|FIG\.?|Fig\.?", table=r"Tabela|TABELA"),
        "nl": LanguageCues(figure=r"Figuur|FIGUUR|FIG\.?|Fig\.?", table=r"Tabel|TABEL"),
        "da": LanguageCues(figure=r"Figur|FIGUR|FIG\.?|Fig\.?", table=r"Tabel|TABEL"),
        "sv": LanguageCues(figure=r"Figur|FIGUR|FIG\.?|Fig\.?", table=r"Tabell|TABELL"),
        "no": LanguageCues(figure=r"Figur|FIGUR|FIG\.?|Fig\.?", table=r"Tabell|TABELL"),
    }
)

DEFAULT_FILTER_NAMES: Tuple[str, ...] = (
    "Colon Only",
    "Period Only",
    "Bold Only",
    "Italic Only",
    "Only All Caps Figures",
    "Only Abbreviated Figures",
    "No Next Word",
    "Block Start Only",
    "Line Start Only",
    "Next Word Only",
)


def translations_with(extra: Optional[Mapping[str, Any]] = None) -> Mapping[str, LanguageCues]:
    """Return the default translation table merged with ``extra`` entries."""

    if not extra:
        return DEFAULT_TRANSLATIONS
    merged: Dict[str, LanguageCues] = dict(DEFAULT_TRANSLATIONS)
    for lang, cues in extra.items():
        if isinstance(cues, LanguageCues):
            merged[lang] = cues
        elif isinstance(cues, dict):
            merged[lang] = LanguageCues(**cues)
        else:
            raise ValueError(f"Translation for {lang!r} must be a mapping")
    return MappingProxyType(merged)


@dataclass(slots=True)
class ScanConfig:
    """Configuration for cue matching and candidate collection."""

    language: str = "en"
    tables_only: bool = False
    extra_translations: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @property
    def translations(self) -> Mapping[str, LanguageCues]:
        return translations_with(self.extra_translations)


@dataclass(slots=True)
class ResolveConfig:
    """Filter names in priority order."""

    filters: Tuple[str, ...] = DEFAULT_FILTER_NAMES


@dataclass(slots=True)
class ReportConfig:
    """Configuration for result building and diagnostics."""

    max_kept: int = 2
    verbose: bool = False
    log_events: bool = True


@dataclass(slots=True)
class CaptionConfig:
    """Top-level configuration object."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    resolve: ResolveConfig = field(default_factory=ResolveConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptionConfig":
        """Build a :class:`CaptionConfig` from a nested mapping."""

        def build(name: str, typ: Any) -> Any:
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ValueError(f"Configuration section {name!r} must be a mapping")
            return typ(**section)

        resolve = build("resolve", ResolveConfig)
        return cls(
            scan=build("scan", ScanConfig),
            resolve=replace(resolve, filters=tuple(resolve.filters)),
            report=build("report", ReportConfig),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration into a serialisable mapping."""

        return {
            "scan": {
                "language": self.scan.language,
                "tables_only": self.scan.tables_only,
                "extra_translations": dict(self.scan.extra_translations),
            },
            "resolve": {"filters": list(self.resolve.filters)},
            "report": {
                "max_kept": self.report.max_kept,
                "verbose": self.report.verbose,
                "log_events": self.report.log_events,
            },
        }


def load_config(path: Optional[Path | str] = None) -> CaptionConfig:
    """Load configuration from YAML, defaulting to the packaged defaults."""

    if path is None:
        base = Path(__file__).resolve()
        candidates = [
            base.parent.parent.parent / "configs" / "captions.yaml",
            base.parent.parent / "configs" / "captions.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break
        else:
            return CaptionConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError("Configuration YAML must produce a mapping")
    return CaptionConfig.from_dict(data)
