"""
Zenity Notifier - Exibe alertas como popup de aviso no desktop
"""
import os
import subprocess
from typing import Optional

from application.ports.output.notifier_port import INotifier, NotificationResult
from shared.config import settings


class ZenityNotifier(INotifier):
    """
    Dispara `zenity --warning` para cada alerta
    
    A mensagem vai como argumento (sem shell), então aspas e
    caracteres especiais do texto não precisam de escape.
    """
    
    def __init__(self, display: Optional[str] = None, executable: str = "zenity"):
        self.display = display or settings.ALERT_DISPLAY
        self.executable = executable
    
    def build_command(self, message: str) -> list:
        return [self.executable, "--warning", f"--text={message}"]
    
    def notify(self, message: str) -> NotificationResult:
        env = os.environ.copy()
        env["DISPLAY"] = self.display
        
        try:
            completed = subprocess.run(self.build_command(message), env=env, check=False)
        except OSError as e:
            return NotificationResult(success=False, detail=f"Erro ao executar {self.executable}: {e}")
        
        if completed.returncode != 0:
            return NotificationResult(
                success=False,
                detail=f"{self.executable} terminou com código {completed.returncode}"
            )
        
        return NotificationResult(success=True)
