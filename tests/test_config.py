import pytest

from wordplan.config import DEFAULT_MAX_PLAN_DAYS, DEFAULT_MAX_TOTAL_WORDS, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("MAX_TOTAL_WORDS", "MAX_PLAN_DAYS", "STRICT_MODE", "LOG_LEVEL", "ALLOWED_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.max_total_words == DEFAULT_MAX_TOTAL_WORDS
    assert settings.max_plan_days == DEFAULT_MAX_PLAN_DAYS
    assert settings.default_include_review is True
    assert settings.curve_days == 30
    assert settings.log_level == "INFO"
    assert settings.allowed_cors_origins == ()


def test_limits_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAX_TOTAL_WORDS", "5000")
    monkeypatch.setenv("MAX_PLAN_DAYS", "90")
    monkeypatch.setenv("DEFAULT_INCLUDE_REVIEW", "false")
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    settings = Settings(_env_file=None)

    assert settings.max_total_words == 5000
    assert settings.max_plan_days == 90
    assert settings.default_include_review is False
    assert settings.log_level == "DEBUG"


def test_cors_origins_are_trimmed_and_deduplicated(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(
        "ALLOWED_CORS_ORIGINS",
        " https://a.example.com ,https://b.example.com,,https://a.example.com",
    )

    settings = Settings(_env_file=None)

    assert settings.allowed_cors_origins == ("https://a.example.com", "https://b.example.com")


def test_cors_origins_legacy_alias(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ALLOWED_CORS_ORIGINS", raising=False)
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://c.example.com")

    settings = Settings(_env_file=None)

    assert settings.allowed_cors_origins == ("https://c.example.com",)


def test_strict_mode_rejects_non_positive_limits():
    with pytest.raises(ValueError, match="must be positive when STRICT_MODE=true"):
        Settings(_env_file=None, strict_mode=True, max_total_words=0, max_plan_days=10)


def test_strict_mode_rejects_word_limit_below_day_limit():
    with pytest.raises(ValueError, match="MAX_TOTAL_WORDS must not be lower than MAX_PLAN_DAYS"):
        Settings(_env_file=None, strict_mode=True, max_total_words=10, max_plan_days=30)


def test_non_strict_mode_allows_inconsistent_limits():
    settings = Settings(_env_file=None, strict_mode=False, max_total_words=10, max_plan_days=30)

    assert settings.strict_mode is False
    assert settings.max_total_words == 10


@pytest.mark.parametrize("curve_days", [0, -1])
def test_curve_days_must_be_positive(curve_days: int):
    with pytest.raises(ValueError, match="greater than or equal to 1"):
        Settings(_env_file=None, curve_days=curve_days)
