"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from remote_url.core.models.config import ResolverConfig


class Settings(BaseSettings):
    """Settings loaded from REMOTE_URL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_URL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "INFO"

    # Resolver defaults
    vcs: str | None = None  # "git" | "mercurial" | "subversion"
    service: str | None = None  # "github" | "gitlab" | "bitbucket" | custom
    remote: str = "origin"
    https: bool = True

    # External processes
    process_timeout: float = 10.0

    def to_resolver_config(self, **overrides) -> ResolverConfig:
        """Build a ResolverConfig, letting non-None overrides win."""
        values = {
            "vcs": self.vcs,
            "service": self.service,
            "remote": self.remote,
            "https": self.https,
            "process_timeout": self.process_timeout,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ResolverConfig(**values)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
