"""
Domain Layer: Core Business Models
Session state, search payloads and decoded OpenSubtitles responses.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any

# ============================================================================
# SESSION
# ============================================================================

class Session(BaseModel):
    """Authentication state owned by a single client instance."""
    token: str = Field("", description="Empty until LogIn succeeds")
    user_agent: str
    language: str

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

# ============================================================================
# FILENAME ANALYSIS
# ============================================================================

class FilenameAnalysis(BaseModel):
    """Structured guess produced from a video filename."""
    name: str = ""
    is_series: bool = False
    season: int = 0
    episode: int = 0

# ============================================================================
# SEARCH PAYLOAD
# ============================================================================

class SearchFilter(BaseModel):
    """One entry of the SearchSubtitles filter array."""
    query: str
    sublanguageid: str = ""
    season: Optional[str] = None
    episode: Optional[str] = None

    def to_rpc(self) -> Dict[str, str]:
        # Seri değilse season/episode anahtarları hiç gönderilmez
        return self.model_dump(exclude_none=True)


class SearchOptions(BaseModel):
    """SearchSubtitles options map (only a limit for now)."""
    limit: int

    def to_rpc(self) -> Dict[str, int]:
        return {"limit": self.limit}

# ============================================================================
# RESPONSES
# ============================================================================

class SubtitleEntry(BaseModel):
    """A single subtitle returned by SearchSubtitles."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    subtitle_file_id: Optional[str] = Field(None, alias="IDSubtitleFile")
    file_name: Optional[str] = Field(None, alias="SubFileName")
    language_id: Optional[str] = Field(None, alias="SubLanguageID")
    language_name: Optional[str] = Field(None, alias="LanguageName")
    format: Optional[str] = Field(None, alias="SubFormat")
    movie_name: Optional[str] = Field(None, alias="MovieName")
    release_name: Optional[str] = Field(None, alias="MovieReleaseName")
    movie_year: Optional[str] = Field(None, alias="MovieYear")
    series_season: Optional[str] = Field(None, alias="SeriesSeason")
    series_episode: Optional[str] = Field(None, alias="SeriesEpisode")
    download_link: Optional[str] = Field(None, alias="SubDownloadLink")
    zip_download_link: Optional[str] = Field(None, alias="ZipDownloadLink")
    downloads_count: Optional[str] = Field(None, alias="SubDownloadsCnt")
    imdb_id: str = Field("", alias="IDMovieImdb")

    @field_validator(
        "subtitle_file_id", "movie_year", "series_season", "series_episode",
        "downloads_count", "imdb_id",
        mode="before",
    )
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        # XML-RPC bazen sayısal alanları <int> olarak döner
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class LogInResponse(BaseModel):
    status: str = ""
    token: str = ""
    seconds: Optional[float] = None


class LogOutResponse(BaseModel):
    status: str = ""
    seconds: Optional[float] = None


class SearchSubtitlesResponse(BaseModel):
    """Decoded SearchSubtitles payload."""
    status: str = ""
    data: List[SubtitleEntry] = Field(default_factory=list)
    seconds: Optional[float] = None

    @field_validator("data", mode="before")
    @classmethod
    def _false_means_empty(cls, value: Any) -> Any:
        # Sonuç yoksa servis data=False döner
        if value is False or value is None:
            return []
        return value
