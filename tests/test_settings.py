from mlog._settings import DEFAULT_LOG_LEVEL, DEFAULT_PROMPT, get_settings


def test_defaults(monkeypatch):
    for name in ("MLOG_LOG_LEVEL", "MLOG_PROMPT", "MLOG_CONSOLE_WIDTH"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.log_level == DEFAULT_LOG_LEVEL
    assert s.prompt == DEFAULT_PROMPT
    assert s.console_width == 120


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MLOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("MLOG_PROMPT", "> ")
    monkeypatch.setenv("MLOG_CONSOLE_WIDTH", "80")
    s = get_settings()
    assert (s.log_level, s.prompt, s.console_width) == ("DEBUG", "> ", 80)


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("MLOG_LOG_LEVEL", "loud")
    monkeypatch.setenv("MLOG_CONSOLE_WIDTH", "wide")
    s = get_settings()
    assert s.log_level == DEFAULT_LOG_LEVEL
    assert s.console_width == 120
