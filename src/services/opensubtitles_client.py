# OpenSubtitles Client
import logging
from typing import Optional

from src.domain.errors import DecodeError, ProtocolStatusError
from src.domain.models import (
    Session,
    LogInResponse,
    LogOutResponse,
    SearchSubtitlesResponse,
)
from src.infrastructure.rpc_transport import RpcTransport
from .filename_analyzer import FilenameAnalyzer, GuessitAnalyzer
from .query_builder import SearchQueryBuilder
from .response_normalizer import normalize_search_response

logger = logging.getLogger(__name__)

STATUS_OK = "200 OK"


class OpenSubtitlesClient:
    """
    OpenSubtitles XML-RPC istemcisi.

    Session (token, dil, user-agent) sadece bu instance'a aittir.
    Thread-safe değildir: aynı instance'ı paralel kullanmak için dışarıda kilit gerekir.
    """

    def __init__(
        self,
        language: str,
        user_agent: str,
        transport: Optional[RpcTransport] = None,
        analyzer: Optional[FilenameAnalyzer] = None,
    ):
        """
        Args:
            language: LogIn sırasında gönderilen tercih edilen dil
            user_agent: OpenSubtitles'a kendimizi tanıttığımız kimlik
            transport: RPC katmanı (None ise default oluşturulur)
            analyzer: Dosya adı analizcisi (None ise guessit)
        """
        self.session = Session(language=language, user_agent=user_agent)
        self.transport = transport or RpcTransport(user_agent=user_agent)
        self.query_builder = SearchQueryBuilder(analyzer or GuessitAnalyzer())

    @property
    def token(self) -> str:
        return self.session.token

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def log_in(self, username: str, password: str) -> None:
        """
        Log in and store the returned token (replacing any previous one).

        A payload that cannot be decoded is not treated as a failure here:
        the token simply ends up empty.
        """
        resp = self.transport.call(
            "LogIn", username, password, self.session.language, self.session.user_agent
        )

        try:
            login = resp.unmarshal(LogInResponse)
        except DecodeError as e:
            logger.warning(f"⚠️ LogIn cevabı çözülemedi, token boş kalacak: {e}")
            login = LogInResponse()

        self.session.token = login.token
        logger.info(f"🔑 LogIn tamamlandı (status: {login.status or '-'})")

    def log_out(self) -> None:
        """Log out. The stored token is kept as is."""
        resp = self.transport.call("LogOut", self.session.token)

        logout = resp.unmarshal(LogOutResponse)
        if logout.status != STATUS_OK:
            raise ProtocolStatusError(logout.status, operation="LogOut")

        logger.info("👋 LogOut tamamlandı.")

    def search(self, filename: str, language: str, limit: int) -> SearchSubtitlesResponse:
        """
        Dosya adına göre altyazı arar.

        Args:
            filename: Video dosya adı (örn: Show.S01E02.mkv)
            language: OpenSubtitles sublanguageid (örn: eng)
            limit: Dönecek maksimum kayıt sayısı

        Returns:
            imdb_id alanları normalize edilmiş SearchSubtitlesResponse
        """
        search_filter, options = self.query_builder.build(filename, language, limit)

        resp = self.transport.call(
            "SearchSubtitles",
            self.session.token,
            [search_filter.to_rpc()],
            options.to_rpc(),
        )

        result = resp.unmarshal(SearchSubtitlesResponse)
        if result.status != STATUS_OK:
            raise ProtocolStatusError(result.status, operation="SearchSubtitles")

        logger.info(f"✅ {len(result.data)} altyazı bulundu: '{search_filter.query}'")
        return normalize_search_response(result)
