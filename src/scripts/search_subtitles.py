"""
Subtitle Search Script
Verilen video dosyası için OpenSubtitles'ta altyazı arar.

Kullanım:
    python -m src.scripts.search_subtitles Show.S01E02.mkv [eng]
"""
import logging
import sys
from pathlib import Path

# Path ayarı: Proje kökünü Python path'ine ekle
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.infrastructure.config import get_settings
from src.services.opensubtitles_client import OpenSubtitlesClient

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(argv):
    if not argv:
        logger.error("Dosya adı verilmedi. Kullanım: search_subtitles <dosya> [dil]")
        return 2

    filename = argv[0]
    language = argv[1] if len(argv) > 1 else settings.OPENSUBTITLES_LANGUAGE

    logger.info("=" * 60)
    logger.info(f"🎬 ALTYAZI ARAMASI: {filename} ({language})")
    logger.info("=" * 60)

    client = OpenSubtitlesClient(
        language=settings.OPENSUBTITLES_LANGUAGE,
        user_agent=settings.OPENSUBTITLES_USER_AGENT,
    )

    try:
        client.log_in(settings.OPENSUBTITLES_USERNAME, settings.OPENSUBTITLES_PASSWORD)
        result = client.search(filename, language, settings.SEARCH_LIMIT)

        for entry in result.data:
            print(f"{entry.imdb_id}\t{entry.language_id}\t{entry.file_name}\t{entry.download_link}")

        client.log_out()
        logger.info("🎉 İşlem tamamlandı.")

    except Exception as e:
        logger.error(f"❌ Kritik hata: {e}", exc_info=True)
        raise

    finally:
        client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
