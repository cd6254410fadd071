# Response Normalizer
import re

from src.domain.models import SearchSubtitlesResponse

_INTEGER = re.compile(r"[+-]?[0-9]+")


def reformat_imdb_id(raw: str) -> str:
    """
    OpenSubtitles IMDb ID'yi 'tt' öneki olmadan ve sıfırları kırpılmış döner
    ("468569"). IMDb formatı: tt + en az 7 hane ("tt0468569").

    Sayı değilse değer olduğu gibi geri döner (hata fırlatılmaz).
    """
    if not _INTEGER.fullmatch(raw):
        return raw
    return f"tt{int(raw):07d}"


def normalize_search_response(response: SearchSubtitlesResponse) -> SearchSubtitlesResponse:
    """Her kayıttaki imdb_id alanını yeniden formatlar."""
    for entry in response.data:
        entry.imdb_id = reformat_imdb_id(entry.imdb_id)
    return response
