import pytest
from unittest.mock import Mock

from src.services.query_builder import SearchQueryBuilder
from src.domain.models import FilenameAnalysis, SearchFilter, SearchOptions


def builder_for(result: FilenameAnalysis) -> SearchQueryBuilder:
    analyzer = Mock()
    analyzer.analyze.return_value = result
    return SearchQueryBuilder(analyzer)


def test_series_adds_season_and_episode():
    builder = builder_for(FilenameAnalysis(name="Show", is_series=True, season=1, episode=2))

    search_filter, options = builder.build("Show.S01E02.mkv", "en", 10)

    builder.analyzer.analyze.assert_called_once_with("Show.S01E02.mkv")
    assert isinstance(search_filter, SearchFilter)
    assert isinstance(options, SearchOptions)
    assert search_filter.to_rpc() == {
        "query": "Show",
        "sublanguageid": "en",
        "season": "1",
        "episode": "2",
    }
    assert options.to_rpc() == {"limit": 10}


def test_movie_has_no_series_keys():
    builder = builder_for(FilenameAnalysis(name="Inception", is_series=False, season=3, episode=4))

    search_filter, _ = builder.build("Inception.2010.mkv", "tr", 5)

    assert search_filter.to_rpc() == {"query": "Inception", "sublanguageid": "tr"}


def test_empty_name_is_sent_as_is():
    builder = builder_for(FilenameAnalysis(name=""))

    search_filter, _ = builder.build("???", "en", 1)

    assert search_filter.to_rpc()["query"] == ""


@pytest.mark.parametrize("season,episode", [(0, 0), (12, 105)])
def test_series_numbers_are_base10_strings(season, episode):
    builder = builder_for(FilenameAnalysis(name="X", is_series=True, season=season, episode=episode))

    search_filter, _ = builder.build("x", "en", 1)

    assert search_filter.season == str(season)
    assert search_filter.episode == str(episode)
