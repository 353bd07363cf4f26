"""Configuration settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Step settings loaded from the GitHub Actions environment."""

    model_config = ConfigDict(
        env_file=[".env"],
        extra="ignore",
    )

    # Action input (GitHub exposes `with: path:` as INPUT_PATH)
    input_path: Path | None = None

    # Workflow run metadata
    github_ref: str | None = None
    github_sha: str | None = None

    # Step outputs file
    github_output: Path | None = None

    @field_validator("input_path", "github_output", mode="before")
    @classmethod
    def empty_path_is_absent(cls, value):
        """Treat an empty variable as unset instead of the current directory."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def get_branch_ref(self) -> str | None:
        """Return the triggering ref, treating an empty value as absent."""
        return self.github_ref or None

    @property
    def app_version(self) -> str:
        """Read app version from pyproject.toml."""
        import re

        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        try:
            text = pyproject.read_text(encoding="utf-8")
        except OSError:
            return "unknown"
        match = re.search(r'(?m)^version\s*=\s*"([^"]+)"', text)
        return match.group(1) if match else "unknown"


@lru_cache
def get_settings() -> Settings:
    """Get step settings."""
    return Settings()
