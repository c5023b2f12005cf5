"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://leetcode.cn"

# LeetCode language slugs -> code fence languages understood by Prism
FENCE_LANGUAGES = {
    "python3": "python",
    "python": "python",
    "golang": "go",
    "csharp": "csharp",
    "cpp": "cpp",
    "c": "c",
    "java": "java",
    "javascript": "javascript",
    "typescript": "typescript",
    "kotlin": "kotlin",
    "rust": "rust",
    "ruby": "ruby",
    "scala": "scala",
    "swift": "swift",
    "php": "php",
    "mysql": "sql",
    "mssql": "sql",
    "oraclesql": "sql",
    "bash": "bash",
}


def get_fence_language(lang: str) -> str:
    """Maps a LeetCode language slug to a markdown code fence language."""
    return FENCE_LANGUAGES.get(lang.lower(), lang.lower())


class SyncConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Authentication
    username: str
    password: str

    # Site & fetching
    base_url: str = DEFAULT_BASE_URL
    language: str = "javascript"
    max_workers: int = 8
    limit: int = 0
    use_translation: bool = False

    # Output
    output_dir: str = "solutions"
    summary_file: str = "summary.json"

    @field_validator("username", "password")
    @classmethod
    def validate_credentials(cls, v: str) -> str:
        if not v:
            raise ValueError(
                "Credentials are incomplete. Both username and password are required."
            )
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the site URL is absolute and drops any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://, got: {v}")
        return v.rstrip("/")

    @field_validator("max_workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """Ensures a reasonable number of workers."""
        if v < 1 or v > 32:
            raise ValueError("Max workers must be between 1 and 32.")
        return v

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Limit cannot be negative (use 0 for no limit).")
        return v

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("Output directory cannot be empty.")
        return v

    @field_validator("summary_file")
    @classmethod
    def validate_summary_file(cls, v: str) -> str:
        if not v or "/" in v or "\\" in v:
            raise ValueError("Summary file must be a plain file name.")
        return v

    @property
    def fence_language(self) -> str:
        return get_fence_language(self.language)

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
