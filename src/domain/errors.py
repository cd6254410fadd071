"""
Domain Layer: Error Taxonomy
OpenSubtitles çağrılarında oluşabilecek hata türleri.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Hata sınıflandırması."""
    TRANSPORT = "transport"
    UNAVAILABLE = "unavailable"
    PROTOCOL_STATUS = "protocol_status"
    DECODE = "decode"


class OpenSubtitlesError(Exception):
    """Base error for every failure surfaced by the client."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        detail: str,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.detail = detail
        self.operation = operation
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        if self.operation:
            return f"{self.operation} başarısız ({self.kind.value}): {self.detail}"
        return f"{self.kind.value}: {self.detail}"


class TransportError(OpenSubtitlesError):
    """Network ya da request oluşturma hatası (retry edilmez)."""
    kind = ErrorKind.TRANSPORT


class UnavailableError(OpenSubtitlesError):
    """Tüm denemelerden sonra HTTP 200 alınamadı."""
    kind = ErrorKind.UNAVAILABLE

    def __init__(self, status: str, operation: Optional[str] = None):
        self.status = status
        super().__init__(f"Bad HTTP status: {status}", operation=operation)


class ProtocolStatusError(OpenSubtitlesError):
    """HTTP 200 geldi ama gövdedeki status '200 OK' değil."""
    kind = ErrorKind.PROTOCOL_STATUS

    def __init__(self, status: str, operation: Optional[str] = None):
        self.status = status
        super().__init__(f"Bad status returned: {status}", operation=operation)


class DecodeError(OpenSubtitlesError):
    """Payload beklenen şekle çevrilemedi."""
    kind = ErrorKind.DECODE
