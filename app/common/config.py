import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    dictionary_ttl_s: float = float(os.getenv("DICTIONARY_TTL_S", "1800"))
    dictionary_refresh_interval_s: int = int(os.getenv("DICTIONARY_REFRESH_INTERVAL_S", "300"))
    suggestion_limit: int = int(os.getenv("SUGGESTION_LIMIT", "5"))
    max_edit_distance: int = int(os.getenv("MAX_EDIT_DISTANCE", "2"))
    autocorrect_confidence: int = int(os.getenv("AUTOCORRECT_CONFIDENCE", "75"))
    max_text_length: int = int(os.getenv("MAX_TEXT_LENGTH", "100000"))
    batch_max_texts: int = int(os.getenv("BATCH_MAX_TEXTS", "100"))
    batch_max_text_length: int = int(os.getenv("BATCH_MAX_TEXT_LENGTH", "10000"))


settings = Settings()
