"""Tests for commandhandler.config module."""
from __future__ import annotations

import os
from unittest import mock

from commandhandler.config import HandlerSettings, get_settings


class TestHandlerSettings:
    """Tests for HandlerSettings class."""

    def test_default_values(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = HandlerSettings()
        assert settings.using_no_perm is True
        assert settings.no_permission_message == "§cno permit!"
        assert settings.usage_color == "§c"

    def test_env_override(self):
        with mock.patch.dict(os.environ, {
            "COMMANDHANDLER_USING_NO_PERM": "false",
            "COMMANDHANDLER_NO_PERMISSION_MESSAGE": "Denied",
        }):
            settings = HandlerSettings()
            assert settings.using_no_perm is False
            assert settings.no_permission_message == "Denied"

    def test_unknown_env_ignored(self):
        with mock.patch.dict(os.environ, {"COMMANDHANDLER_SOMETHING_ELSE": "1"}):
            settings = HandlerSettings()
            assert not hasattr(settings, "something_else")


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), HandlerSettings)

    def test_creates_new_instance_each_call(self):
        assert get_settings() is not get_settings()
