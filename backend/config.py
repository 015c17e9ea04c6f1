from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Student Directory API"
    database_url: str = "sqlite:///./studentsinfo.sqlite"
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"
    sql_echo: bool = False

    @property
    def safe_database_url(self) -> str:
        """Database URL with credentials stripped, for logging."""
        if "@" in self.database_url:
            scheme, _, rest = self.database_url.partition("://")
            return f"{scheme}://...@{rest.split('@', 1)[1]}"
        return self.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
