import csv
from pathlib import Path

from core.config.config_service import config_service
from core.logging.logic.logger import logger

LOCALE_TRACK_MISSING_KEYS = True


class TranslationManager:
    """
    Verwaltet Übersetzungen aus zentralen labels.tsv Dateien.
    Unterstützt Logging von fehlenden Einträgen.
    """

    def __init__(self):
        self.translations = {}  # {lang: {label: text}}
        self.coverage = {}      # {lang: float}
        self._missing_keys_logged = set()

    def load_files(self, file_paths: list[Path]) -> None:
        """Lädt und analysiert mehrere Übersetzungsdateien."""
        self.translations = {}
        self.coverage = {}
        all_labels: set[str] = set()

        for file_path in file_paths:
            with open(file_path, encoding="utf-8") as f:
                reader = csv.reader(f, delimiter="\t")
                header = next(reader)
                langs = header[1:]
                for lang in langs:
                    self.translations.setdefault(lang, {})

                for row in reader:
                    if not row:
                        continue
                    label = row[0]
                    all_labels.add(label)
                    for i, lang in enumerate(langs):
                        text = row[i + 1] if i + 1 < len(row) else ""
                        self.translations[lang][label] = text

        row_count = len(all_labels)
        for lang in self.translations:
            translated = sum(bool(v) for v in self.translations[lang].values())
            self.coverage[lang] = translated / row_count if row_count else 1.0

    def load_file(self, file_path: Path) -> None:
        """Kompatibilitätsmethode für Einzeldateien."""
        self.load_files([file_path])

    def available_languages(self) -> list[str]:
        """Gibt alle geladenen Sprachen zurück."""
        return list(self.translations.keys())

    def t(self, label: str, lang: str, default: str | None = None) -> str:
        """
        Gibt die Übersetzung zurück, sonst ``default`` bzw. das Label selbst.
        Loggt fehlende Keys nur einmalig (sofern aktiviert).
        """
        value = self.translations.get(lang, {}).get(label)
        if value:
            return value

        if LOCALE_TRACK_MISSING_KEYS and (label, lang) not in self._missing_keys_logged:
            logger.log(
                feature="Locale",
                event="MissingKey",
                message=f"Missing translation key '{label}' (lang={lang})",
            )
            self._missing_keys_logged.add((label, lang))

        return default if default is not None else label


# Globale Instanz
translations = TranslationManager()
if config_service.i18n.labels_tsv.exists():
    translations.load_file(config_service.i18n.labels_tsv)


def T(label: str, default: str | None = None) -> str:
    """Global verwendbare Übersetzungsfunktion (konfigurierte Sprache)."""
    return translations.t(label, config_service.i18n.language, default)
