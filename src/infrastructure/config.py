from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    APP_NAME: str = "SubSeek"
    LOG_LEVEL: str = "INFO"

    # OpenSubtitles (XML-RPC)
    OPENSUBTITLES_API_URL: str = "http://api.opensubtitles.org/xml-rpc"
    OPENSUBTITLES_USER_AGENT: str = "SubSeek v1.0"
    OPENSUBTITLES_LANGUAGE: str = "en"

    # Boş kullanıcı adı/şifre ile anonim giriş yapılır
    OPENSUBTITLES_USERNAME: str = ""
    OPENSUBTITLES_PASSWORD: str = ""

    # Transport
    MAX_ATTEMPTS: int = 3
    HTTP_TIMEOUT_SECONDS: Optional[float] = 30.0

    SEARCH_LIMIT: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"  # Tanımlanmamış değişkenler varsa hata verme, görmezden gel
    )

@lru_cache()
def get_settings():
    return Settings()
