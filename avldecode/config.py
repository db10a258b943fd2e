from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    # Raise instead of warn when the footer record count disagrees with the header.
    strict_record_count: bool = Field(False, validation_alias="AVL_STRICT_RECORD_COUNT")

    log_ring_size: int = Field(200, validation_alias="AVL_LOG_RING_SIZE")
    log_level: str = Field("INFO", validation_alias="AVL_LOG_LEVEL")
    redact_identity: bool = Field(True, validation_alias="AVL_REDACT_IDENTITY")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
