from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# currencylayer.com
	CURRENCYLAYER_BASE_URL: str = 'http://api.currencylayer.com'
	CURRENCYLAYER_ENDPOINT: str = 'live'
	CURRENCYLAYER_ACCESS_KEY: str = ''

	HTTP_TIMEOUT: int = 10

	# Browser front-end origins
	CORS_ORIGINS: list[str] = ['http://localhost:5000', 'https://localhost:5001']

	# Application
	APP_NAME: str = 'Dollar Price Functions'
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
