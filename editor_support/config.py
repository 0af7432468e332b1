from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "CMS Editor Support"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Declarative rules loaded at startup
    rules_file: str = "data/editor_support.json"

    # Admin edit screens
    admin_path_prefix: str = "/admin"
    edit_page: str = "post.php"
    new_page: str = "post-new.php"
    default_post_type: str = "post"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
