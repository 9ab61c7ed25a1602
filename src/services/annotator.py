"""Stateful annotator shell around the pure matching core.

Holds the current configuration and index. A configuration change that
needs a different index builds a new one and swaps the reference in a
single assignment, so a scan already running keeps the index it started
with.
"""

from dataclasses import dataclass

from models import UserConfig
from services.matcher import AnnotationSpan, AnnotatorConfig, annotate, lookup_word, resolve_translation
from services.rendering import annotation_stylesheet, render_ruby
from services.vocabulary import VocabularyEntry, VocabularyIndex
from services.wordlist import KoreanWordList


@dataclass(frozen=True, slots=True)
class ConfigChange:
    """What differs between two configurations."""

    level: bool = False
    language: bool = False
    highlight: bool = False
    font_size: bool = False
    enabled: bool = False

    @property
    def needs_reannotation(self) -> bool:
        """Font size alone only needs a stylesheet update."""
        return self.level or self.language or self.highlight or self.enabled


class KoreanAnnotator:
    """Annotates text with the current word list and user settings."""

    def __init__(
        self,
        wordlist: KoreanWordList,
        config: UserConfig | None = None,
        index: VocabularyIndex | None = None,
    ) -> None:
        """
        Args:
            wordlist: Source of entries for (re)building indexes.
            config: Initial settings; defaults to UserConfig().
            index: Prebuilt index for ``config.level``, shared instead of
                   building a new one.
        """
        self._wordlist = wordlist
        self._config = config or UserConfig()
        # Validates language/level up front
        self._core_config = AnnotatorConfig(self._config.target_language, self._config.level)
        self._index = index if index is not None else wordlist.build_index(self._config.level)

    @property
    def config(self) -> UserConfig:
        return self._config

    @property
    def index(self) -> VocabularyIndex:
        return self._index

    def update_config(self, new_config: UserConfig) -> ConfigChange:
        """Apply new settings, rebuilding the index only if the level changed.

        Raises:
            ConfigurationError: If the new language or level is invalid; the
                current settings are kept.
        """
        old = self._config
        core_config = AnnotatorConfig(new_config.target_language, new_config.level)
        change = ConfigChange(
            level=new_config.level != old.level,
            language=core_config.target_language != self._core_config.target_language,
            highlight=new_config.show_highlight != old.show_highlight,
            font_size=new_config.font_size != old.font_size,
            enabled=new_config.enabled != old.enabled,
        )

        if change.level:
            self._index = self._wordlist.build_index(new_config.level)
        self._core_config = core_config
        self._config = new_config
        return change

    def annotate(self, text: str) -> list[AnnotationSpan]:
        """Spans for text, or nothing when annotation is disabled."""
        if not self._config.enabled:
            return []
        return annotate(text, self._index, self._core_config)

    def annotate_html(self, text: str) -> str:
        """Text with ruby annotations, HTML-escaped."""
        return render_ruby(text, self.annotate(text), show_highlight=self._config.show_highlight)

    def lookup(self, word: str) -> VocabularyEntry | None:
        """Dictionary entry for a single conjugated word."""
        return lookup_word(word, self._index, self._core_config)

    def translate(self, entry: VocabularyEntry, surface: str) -> str:
        """Translation of an entry in the configured language."""
        return resolve_translation(entry, self._core_config.target_language, surface)

    def stylesheet(self, font_size: int | None = None) -> str:
        return annotation_stylesheet(self._config.font_size if font_size is None else font_size)
