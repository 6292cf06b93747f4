import pytest
from keycase_lint.casing import is_camel_case, suggest_snake_case


@pytest.mark.parametrize("key", ["firstName", "expenseType", "getURL", "aB", "x_yZ", "10thDay"])
def test_is_camel_case_detects_hump(key):
    """Test keys with a lowercase-to-uppercase boundary are flagged."""
    assert is_camel_case(key)


@pytest.mark.parametrize(
    "key", ["first_name", "veteran", "SSN", "URLPath", "123", "", "First_Name", "a-b", "éA"]
)
def test_is_camel_case_passes_without_hump(key):
    """Test keys without a lowercase-to-uppercase boundary pass."""
    assert not is_camel_case(key)


def test_suggest_snake_case_single_boundary():
    """Test simple camelCase conversion."""
    assert suggest_snake_case("firstName") == "first_name"
    assert suggest_snake_case("expenseType") == "expense_type"


def test_suggest_snake_case_multiple_boundaries():
    """Test every boundary gets an underscore."""
    assert suggest_snake_case("myLongKeyName") == "my_long_key_name"


def test_suggest_snake_case_acronym_is_not_split():
    """Test a run of capitals is lowercased without extra underscores."""
    assert suggest_snake_case("getURL") == "get_url"
    assert suggest_snake_case("aBC") == "a_bc"


def test_suggest_snake_case_adjacent_humps():
    """Test single non-overlapping pass over alternating case."""
    assert suggest_snake_case("aBcD") == "a_bc_d"


def test_suggest_snake_case_on_snake_key_only_lowercases():
    """Test already-underscored keys are returned lowercased."""
    assert suggest_snake_case("first_name") == "first_name"
    assert suggest_snake_case("SSN") == "ssn"
    assert suggest_snake_case("Veteran_Name") == "veteran_name"
