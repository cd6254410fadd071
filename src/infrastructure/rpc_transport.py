"""
Infrastructure: XML-RPC over HTTP Transport
Her mantıksal çağrı için tek bir POST atar, 200 dışı HTTP kodlarında tekrar dener.
"""
import logging
import xmlrpc.client
from typing import Optional, Type, TypeVar
from xml.parsers.expat import ExpatError

import requests
from pydantic import BaseModel, ValidationError
from tenacity import Retrying, stop_after_attempt, wait_none, retry_if_exception_type

from src.infrastructure.config import get_settings
from src.domain.errors import TransportError, UnavailableError, DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class RpcResponse:
    """Ham XML-RPC cevabı. Yorumlama çağırana bırakılır."""

    def __init__(self, body: bytes, method: str):
        self.body = body
        self.method = method

    def unmarshal(self, model: Type[M]) -> M:
        """
        Decode the XML-RPC payload and validate it into `model`.

        Raises:
            DecodeError: body is not a valid methodResponse, is a fault,
                or does not fit the model.
        """
        try:
            params, _ = xmlrpc.client.loads(self.body, use_builtin_types=True)
        except xmlrpc.client.Fault as e:
            raise DecodeError(
                f"XML-RPC fault {e.faultCode}: {e.faultString}",
                operation=self.method, cause=e,
            ) from e
        except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError) as e:
            raise DecodeError(f"Geçersiz XML-RPC cevabı: {e}", operation=self.method, cause=e) from e

        if not params:
            raise DecodeError("Cevapta parametre yok", operation=self.method)

        try:
            return model.model_validate(params[0])
        except ValidationError as e:
            raise DecodeError(
                f"Beklenmeyen format ({model.__name__}): {e.error_count()} hata",
                operation=self.method, cause=e,
            ) from e


class RpcTransport:
    """
    OpenSubtitles XML-RPC endpoint'ine istek atan katman.

    Retry Stratejisi:
    - HTTP != 200: EVET (toplam max_attempts deneme, bekleme yok)
    - Network / request oluşturma hatası: HAYIR, hemen fırlatılır
    """

    def __init__(
        self,
        user_agent: str,
        url: Optional[str] = None,
        max_attempts: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.url = url or settings.OPENSUBTITLES_API_URL
        self.user_agent = user_agent
        self.max_attempts = max_attempts if max_attempts is not None else settings.MAX_ATTEMPTS
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.HTTP_TIMEOUT_SECONDS

        if self.max_attempts < 1:
            raise ValueError(f"max_attempts en az 1 olmalı. Gelen: {self.max_attempts}")

        # Connection Pooling
        self.session = session or requests.Session()

    def close(self):
        self.session.close()
        logger.debug("Session kapatıldı.")

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.user_agent,
            "Content-Type": "text/xml",
        }

    def _encode(self, method: str, params: tuple) -> bytes:
        try:
            return xmlrpc.client.dumps(params, methodname=method).encode("utf-8")
        except (TypeError, OverflowError) as e:
            raise TransportError(f"Request oluşturulamadı: {e}", operation=method, cause=e) from e

    def _attempt(self, method: str, payload: bytes, attempt_number: int) -> bytes:
        """Tek deneme: 200 ise gövdeyi döner, değilse UnavailableError fırlatır."""
        try:
            response = self.session.post(
                self.url,
                data=payload,
                headers=self.headers,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"❌ Network hatası ({method}): {e}")
            raise TransportError(str(e), operation=method, cause=e) from e

        # Bağlantı her durumda serbest bırakılır
        with response:
            if response.status_code != 200:
                status = f"{response.status_code} {response.reason or ''}".strip()
                logger.warning(
                    f"⚠️ OpenSubtitles erişilemiyor ({method}): {status} "
                    f"- deneme {attempt_number}/{self.max_attempts}"
                )
                raise UnavailableError(status, operation=method)

            try:
                return response.content
            except requests.RequestException as e:
                raise TransportError(f"Cevap okunamadı: {e}", operation=method, cause=e) from e

    def call(self, method: str, *params) -> RpcResponse:
        """
        Perform one logical XML-RPC call.

        Args:
            method: Remote method name (LogIn, LogOut, SearchSubtitles)
            *params: Positional parameters, encoded in order

        Returns:
            RpcResponse wrapping the raw body of the HTTP 200 response

        Raises:
            TransportError: encoding/request construction or network failure
            UnavailableError: no HTTP 200 after max_attempts
        """
        payload = self._encode(method, params)
        logger.debug(f"XML-RPC çağrısı: {method} ({len(payload)} byte)")

        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_none(),
            retry=retry_if_exception_type(UnavailableError),
            reraise=True,
        )

        try:
            for attempt in retrying:
                with attempt:
                    body = self._attempt(method, payload, attempt.retry_state.attempt_number)
        except UnavailableError as e:
            logger.error(f"❌ {self.max_attempts} denemede de başarısız ({method}): {e.status}")
            raise

        return RpcResponse(body, method)
