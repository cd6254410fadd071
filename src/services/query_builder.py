"""
Search Query Builder
Dosya adı analizini SearchSubtitles filtre/opsiyon yapısına çevirir.
"""
from typing import Tuple

from src.domain.models import SearchFilter, SearchOptions
from .filename_analyzer import FilenameAnalyzer


class SearchQueryBuilder:
    """Analiz sonucu doğrulanmaz: boş isim boş query olarak gider."""

    def __init__(self, analyzer: FilenameAnalyzer):
        self.analyzer = analyzer

    def build(self, filename: str, language: str, limit: int) -> Tuple[SearchFilter, SearchOptions]:
        result = self.analyzer.analyze(filename)

        search_filter = SearchFilter(query=result.name, sublanguageid=language)
        if result.is_series:
            search_filter.season = str(result.season)
            search_filter.episode = str(result.episode)

        return search_filter, SearchOptions(limit=limit)
