from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="SCAFFOLD_", extra="ignore")

    app_name: str = "crud-module-scaffold"
    log_level: str = "INFO"

    modules_dir: str = "app/modules"
    database_url: str = "sqlite:///./scaffold.db"

settings = Settings()
