import pytest

ENV_VARS = [
    "TRUTHTAB_STYLE",
    "TRUTHTAB_TRUE_GLYPH",
    "TRUTHTAB_FALSE_GLYPH",
    "TRUTHTAB_STRICT_IMPLICATION",
    "TRUTHTAB_MAX_VARIABLES",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every TRUTHTAB_* variable, restoring them (and any .env leaks) afterwards."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
