"""
Configuração centralizada de logging do batch
Logger AWS Lambda Powertools (JSON estruturado) escrevendo no stderr,
para que diagnósticos de falha saiam no fluxo de erro do processo
"""
import os
import sys
from typing import IO, Optional

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'weather-batch'


def get_logger(
    service_name: Optional[str] = None,
    child: bool = False,
    stream: Optional[IO[str]] = None
) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa DD_SERVICE do ambiente)
        child: Se True, cria um child logger (herda handler do logger principal)
        stream: Destino dos registros (padrão: sys.stderr no momento da chamada)

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = os.environ.get('DD_SERVICE', DEFAULT_SERVICE_NAME)

    if child:
        return Logger(service=service_name, child=True)

    return Logger(service=service_name, stream=stream or sys.stderr)


# Logger principal da aplicação
logger = get_logger()
