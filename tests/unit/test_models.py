import pytest
from unittest.mock import patch
from pydantic import ValidationError

from src.domain.models import (
    Session,
    SearchFilter,
    SubtitleEntry,
    SearchSubtitlesResponse,
)
from src.domain.errors import (
    ErrorKind,
    OpenSubtitlesError,
    TransportError,
    UnavailableError,
    ProtocolStatusError,
    DecodeError,
)
from src.infrastructure.config import Settings


class TestSession:

    def test_token_defaults_empty(self):
        session = Session(user_agent="UA", language="en")
        assert session.token == ""
        assert session.is_authenticated is False

    def test_authenticated_with_token(self):
        session = Session(user_agent="UA", language="en", token="abc")
        assert session.is_authenticated is True


class TestSubtitleEntry:

    def test_wire_aliases(self):
        entry = SubtitleEntry.model_validate({
            "SubFileName": "Movie.srt",
            "SubLanguageID": "eng",
            "IDMovieImdb": "133093",
            "MovieName": "The Matrix",
        })
        assert entry.file_name == "Movie.srt"
        assert entry.language_id == "eng"
        assert entry.imdb_id == "133093"
        assert entry.movie_name == "The Matrix"

    def test_integer_ids_become_text(self):
        entry = SubtitleEntry.model_validate({"IDMovieImdb": 133093, "IDSubtitleFile": 42})
        assert entry.imdb_id == "133093"
        assert entry.subtitle_file_id == "42"

    def test_unknown_fields_are_kept(self):
        entry = SubtitleEntry.model_validate({"IDMovieImdb": "1", "SubHash": "deadbeef"})
        assert entry.model_extra["SubHash"] == "deadbeef"


class TestSearchModels:

    def test_data_false_means_no_results(self):
        resp = SearchSubtitlesResponse.model_validate({"status": "200 OK", "data": False})
        assert resp.data == []

    def test_invalid_data(self):
        with pytest.raises(ValidationError):
            SearchSubtitlesResponse.model_validate({"status": "200 OK", "data": "x"})

    def test_filter_omits_missing_series_fields(self):
        assert SearchFilter(query="Q", sublanguageid="en").to_rpc() == {"query": "Q", "sublanguageid": "en"}


class TestErrors:

    @pytest.mark.parametrize("error,kind", [
        (TransportError("down"), ErrorKind.TRANSPORT),
        (UnavailableError("503 Service Unavailable"), ErrorKind.UNAVAILABLE),
        (ProtocolStatusError("404 Not Found"), ErrorKind.PROTOCOL_STATUS),
        (DecodeError("bad xml"), ErrorKind.DECODE),
    ])
    def test_kinds(self, error, kind):
        assert isinstance(error, OpenSubtitlesError)
        assert error.kind is kind
        assert not str(error).endswith("\n")

    def test_operation_in_message(self):
        err = ProtocolStatusError("404 Not Found", operation="LogOut")
        assert str(err).startswith("LogOut")
        assert "404 Not Found" in str(err)

    def test_cause_is_kept(self):
        cause = ValueError("boom")
        err = TransportError("failed", cause=cause)
        assert err.cause is cause


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.OPENSUBTITLES_API_URL == "http://api.opensubtitles.org/xml-rpc"
        assert settings.MAX_ATTEMPTS == 3
        assert settings.SEARCH_LIMIT == 10

    def test_env_variable_override(self):
        with patch.dict('os.environ', {'MAX_ATTEMPTS': '5', 'OPENSUBTITLES_LANGUAGE': 'tr'}):
            settings = Settings(_env_file=None)
            assert settings.MAX_ATTEMPTS == 5
            assert settings.OPENSUBTITLES_LANGUAGE == "tr"
