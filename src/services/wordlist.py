"""
TOPIK word-list loader.

Reads the vocabulary JSON files shipped under ``data/`` and builds
per-level VocabularyIndex instances from them. Each file is either a JSON
list of entries or an object with a ``"words"`` list:

    [{"word": "먹다", "pos": "verb", "level": "I",
      "translations": {"en": "eat", "zh": "吃", "ja": "食べる"}}, ...]

The level defaults from the filename (topik1*, topik2*) when an entry
doesn't carry one.
"""

import gzip
import json
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Self

from services.errors import DataError
from services.vocabulary import Level, VocabularyEntry, VocabularyIndex, build_index


WORDLIST_PATTERN = re.compile(r"topik([12])[\w-]*\.json(\.gz)?$")
DATA_DIR_ENV = "WORDWISE_DATA_DIR"


class KoreanWordList:
    """
    All vocabulary entries found on disk, parsed once.

    Indexes are built on demand per level selection; each call returns a
    fresh instance so callers can swap them without sharing mutable state.
    """

    def __init__(self, data_dir: Path | str | None = None) -> None:
        """
        Initialize the word list.

        Args:
            data_dir: Directory holding topik1*.json / topik2*.json.
                      If None, searches common locations.
        """
        self._entries: list[VocabularyEntry] = []
        self._files: list[Path] = []
        self._loaded = False

        if data_dir:
            self._load_dir(Path(data_dir))
        else:
            self._find_and_load()

    def _find_and_load(self) -> None:
        """Find word lists in common locations."""
        search_dirs = [
            Path(__file__).parent.parent.parent / "data",
            Path.home() / ".wordwise",
            Path("/app/data"),
        ]
        env_dir = os.environ.get(DATA_DIR_ENV)
        if env_dir:
            search_dirs.insert(0, Path(env_dir))

        for directory in search_dirs:
            if directory.is_dir() and any(self._wordlist_files(directory)):
                self._load_dir(directory)
                return

        print("⚠️ No TOPIK word lists found. Annotation will match nothing.")
        print(f"  Put topik1.json / topik2.json under data/ or set {DATA_DIR_ENV}")

    @staticmethod
    def _wordlist_files(directory: Path) -> list[Path]:
        return sorted(p for p in directory.iterdir() if WORDLIST_PATTERN.match(p.name))

    def _load_dir(self, directory: Path) -> None:
        """Load every word list in a directory."""
        if not directory.is_dir():
            raise DataError(f"Vocabulary directory not found: {directory}")
        for path in self._wordlist_files(directory):
            self._load(path)
        self._loaded = bool(self._files)

    def _load(self, path: Path) -> None:
        """Load and parse one word-list file."""
        print(f"📚 Loading word list from {path}...")

        match = WORDLIST_PATTERN.match(path.name)
        default_level = Level.I if match and match.group(1) == "1" else Level.II

        try:
            if path.suffix == ".gz":
                with gzip.open(path, "rt", encoding="utf-8") as f:
                    data = json.load(f)
            else:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
        except json.JSONDecodeError as e:
            raise DataError(f"Invalid JSON in {path}: {e}") from e

        words = self._records(data, path)
        try:
            entries = [VocabularyEntry.from_dict(record, default_level) for record in words]
        except DataError as e:
            raise DataError(f"{path.name}: {e}") from e

        self._entries.extend(entries)
        self._files.append(path)
        print(f"✓ Loaded {len(entries)} entries (TOPIK {default_level})")

    @staticmethod
    def _records(data: Any, path: Path) -> list[Any]:
        if isinstance(data, dict):
            data = data.get("words")
        if not isinstance(data, list):
            raise DataError(f"{path.name}: expected a list of entries or an object with 'words'")
        return data

    @classmethod
    @lru_cache(maxsize=1)
    def get_instance(cls) -> Self:
        """Get or create a singleton instance."""
        return cls()

    def build_index(self, level: str = "ALL") -> VocabularyIndex:
        """Build a fresh index for a level selection (I, II, ALL)."""
        return build_index(self._entries, level=level)

    @property
    def entries(self) -> tuple[VocabularyEntry, ...]:
        return tuple(self._entries)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def files(self) -> tuple[Path, ...]:
        return tuple(self._files)

    @property
    def is_loaded(self) -> bool:
        """Check if at least one word list was loaded."""
        return self._loaded
