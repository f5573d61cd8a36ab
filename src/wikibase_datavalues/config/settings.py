import logging
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    entity_base_uri: str = "http://www.wikidata.org/entity/"
    test_log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DATAVALUES_", env_file=".env", extra="ignore")

    def entity_uri(self, prefixed_id: str) -> str:
        return f"{self.entity_base_uri}{prefixed_id}"


settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Entity Base URI: {settings.entity_base_uri}")
logger.debug(f"Test Log Level: {settings.test_log_level}")
logger.debug("=== End Settings Debug ===")
