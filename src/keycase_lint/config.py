"""Run settings for keycase-lint."""
import codecs

from pydantic import BaseModel, Field, field_validator

DEFAULT_TIPS = (
    "The backend converts JSON keys from camelCase to snake_case.",
    "Your ERB templates must use snake_case to match the transformed data.",
    "Compare with an existing form mapping template for correct patterns.",
)


class Config(BaseModel):
    """Settings for a single scan, built from command-line options."""

    encoding: str = Field(default="utf-8", min_length=1, description="Template file encoding")
    context_width: int = Field(
        default=81, ge=10, le=1000, description="Maximum context characters per violation"
    )
    tips: tuple[str, ...] = Field(default=DEFAULT_TIPS, description="Report tips")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure encoding is known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}") from None
        return v

    model_config = {"frozen": True}


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with default values
    """
    return Config()
