from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv

# Ensure .env is loaded regardless of current working directory
load_dotenv(find_dotenv(), override=False)


class MirrorSettings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="MIRROR_", frozen=True)
	username: str = "your_github_username"
	repository: str = "your_uploads_repository"
	branch: str = "main"
	# raw | pages | cdn (jsdelivr); anything else falls back to cdn
	hosting_method: str = "cdn"
	user_agent: str = "Mozilla/5.0 (compatible; MediaMirrorProxy/1.0)"
	timeout: float = 10.0


class ProxySettings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="PROXY_", frozen=True)
	path_prefix: str = "/uploads/"
	# Prepended to the full incoming path when the primary lookup returns 404
	fallback_root: str = "wp-content"


class AppSettings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="APP_", frozen=True)
	host: str = "0.0.0.0"
	port: int = 8000
	logs_dir: str = "logs"
	log_level: str = "INFO"


class Settings(BaseSettings):
	model_config = SettingsConfigDict(frozen=True)
	mirror: MirrorSettings = MirrorSettings()
	proxy: ProxySettings = ProxySettings()
	app: AppSettings = AppSettings()


settings = Settings()
