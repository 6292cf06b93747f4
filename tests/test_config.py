import pytest
from pydantic import ValidationError
from keycase_lint.config import DEFAULT_TIPS, Config, get_default_config


def test_default_config():
    """Test default values."""
    config = get_default_config()

    assert config.encoding == "utf-8"
    assert config.context_width == 81
    assert config.tips == DEFAULT_TIPS


def test_config_tips_are_immutable():
    """Test tips cannot be changed in place on a frozen config."""
    config = Config(tips=["Use snake_case."])

    assert config.tips == ("Use snake_case.",)
    with pytest.raises(AttributeError):
        config.tips.append("Another tip.")


def test_config_rejects_unknown_encoding():
    """Test encoding must exist."""
    with pytest.raises(ValidationError, match="unknown encoding"):
        Config(encoding="no-such-codec")


def test_config_rejects_small_context_width():
    """Test context width lower bound."""
    with pytest.raises(ValidationError):
        Config(context_width=5)


def test_config_is_frozen():
    """Test config cannot be modified after creation."""
    config = get_default_config()

    with pytest.raises(ValidationError):
        config.context_width = 100
