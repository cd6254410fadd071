"""
Filename Analyzer
Video dosya adından başlık / sezon / bölüm tahmini üretir.
"""
import logging
from typing import Any, Protocol

from guessit import guessit

from src.domain.models import FilenameAnalysis

logger = logging.getLogger(__name__)


class FilenameAnalyzer(Protocol):
    """Dosya adı analiz interface'i (Dependency Inversion)."""
    def analyze(self, filename: str) -> FilenameAnalysis: ...


def _first_int(value: Any) -> int:
    # guessit çoklu bölümde liste döner (S01E01E02 -> [1, 2])
    if isinstance(value, list):
        value = value[0] if value else 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class GuessitAnalyzer:
    """guessit tabanlı varsayılan analyzer."""

    def analyze(self, filename: str) -> FilenameAnalysis:
        guess = dict(guessit(filename))
        logger.debug(f"guessit sonucu ({filename}): {guess}")

        title = guess.get("title") or ""
        return FilenameAnalysis(
            name=str(title).strip(),
            is_series=guess.get("type") == "episode",
            season=_first_int(guess.get("season")),
            episode=_first_int(guess.get("episode")),
        )
