"""
Testes dos notificadores de alerta
"""
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from infrastructure.adapters.output.notifiers import (
    LogNotifier,
    RecordingNotifier,
    ZenityNotifier,
    get_notifier,
)
from infrastructure.adapters.output.notifiers import zenity_notifier as zenity_module


class TestZenityNotifier:
    
    def test_build_command(self):
        notifier = ZenityNotifier(display=":0")
        
        assert notifier.build_command('Alert "quoted"') == ["zenity", "--warning", '--text=Alert "quoted"']
    
    def test_success(self):
        with patch.object(zenity_module.subprocess, 'run', return_value=MagicMock(returncode=0)) as run:
            result = ZenityNotifier(display=":1").notify("High Wind Speed Alert for Karachi: 25.00 m/s")
        
        assert result.success
        args, kwargs = run.call_args
        assert args[0][-1] == "--text=High Wind Speed Alert for Karachi: 25.00 m/s"
        assert kwargs['env']['DISPLAY'] == ":1"
        assert 'shell' not in kwargs
    
    def test_non_zero_exit_is_failure(self):
        with patch.object(zenity_module.subprocess, 'run', return_value=MagicMock(returncode=5)):
            result = ZenityNotifier().notify("msg")
        
        assert not result.success
        assert "5" in result.detail
    
    def test_missing_executable_is_failure(self):
        with patch.object(zenity_module.subprocess, 'run', side_effect=FileNotFoundError("zenity")):
            result = ZenityNotifier().notify("msg")
        
        assert not result.success
        assert "zenity" in result.detail
    
    def test_display_defaults_to_settings(self, monkeypatch):
        from shared.config import settings
        monkeypatch.setattr(settings, 'ALERT_DISPLAY', ':7')
        
        assert ZenityNotifier().display == ':7'


class TestLogNotifier:
    
    def test_always_succeeds(self):
        assert LogNotifier().notify("High Temperature Alert for Lahore: 40.00 °C").success


class TestRecordingNotifier:
    
    def test_records_messages(self):
        notifier = RecordingNotifier()
        
        notifier.notify("a")
        notifier.notify("b")
        
        assert notifier.messages == ["a", "b"]
    
    def test_simulated_failure(self):
        result = RecordingNotifier(fail=True).notify("a")
        
        assert not result.success


class TestNotifierFactory:
    
    @pytest.mark.parametrize("kind,expected", [("zenity", ZenityNotifier), ("log", LogNotifier), ("LOG", LogNotifier)])
    def test_known_kinds(self, kind, expected):
        assert isinstance(get_notifier(kind), expected)
    
    def test_default_from_settings(self, monkeypatch):
        from shared.config import settings
        monkeypatch.setattr(settings, 'ALERT_NOTIFIER', 'log')
        
        assert isinstance(get_notifier(), LogNotifier)
    
    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Notificador desconhecido"):
            get_notifier("carrier-pigeon")
