"""Tests for config/settings.py"""

from config.settings import CommanderSettings


class TestCommanderSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        for name in ("BOT_PREFIX", "BOT_OWNER", "OWNER_OVERRIDE", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = CommanderSettings(_env_file=None)

        assert settings.bot_prefix == "!"
        assert settings.bot_owner == []
        assert settings.owner_override is True
        assert settings.log_level == "INFO"
        assert settings.bot_address == "commander"

    def test_owner_from_comma_separated_string(self):
        settings = CommanderSettings(_env_file=None, bot_owner="1, 2,,3")

        assert settings.bot_owner == ["1", "2", "3"]

    def test_owner_from_number_and_list(self):
        assert CommanderSettings(_env_file=None, bot_owner=42).bot_owner == ["42"]
        assert CommanderSettings(_env_file=None, bot_owner=[1, "2"]).bot_owner == ["1", "2"]

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("BOT_PREFIX", "?")
        monkeypatch.setenv("BOT_OWNER", "7,8")
        monkeypatch.setenv("OWNER_OVERRIDE", "false")

        settings = CommanderSettings(_env_file=None)

        assert settings.bot_prefix == "?"
        assert settings.bot_owner == ["7", "8"]
        assert settings.owner_override is False

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("BOT_PREFIX", raising=False)
        monkeypatch.delenv("BOT_OWNER", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("BOT_PREFIX=>>\nBOT_OWNER=abc\n")

        settings = CommanderSettings(_env_file=env_file)

        assert settings.bot_prefix == ">>"
        assert settings.bot_owner == ["abc"]
