"""
Weather Batch - Ponto de entrada do job
Coleta o tempo atual das localizações fixas, grava os logs e dispara alertas
"""
import sys
from typing import Optional

from application.ports.output.notifier_port import INotifier
from application.services.threshold_evaluator import ThresholdEvaluator
from application.use_cases.process_weather_batch import BatchReport, ProcessWeatherBatchUseCase
from domain.exceptions import AllocationError
from infrastructure.adapters.output.notifiers import get_notifier
from infrastructure.adapters.output.providers.openmeteo import get_openmeteo_provider
from infrastructure.adapters.output.static_location_repository import get_location_repository
from infrastructure.adapters.output.text_file_sink import TextFileObservationSink
from shared.config.logger_config import logger


def build_use_case(notifier: Optional[INotifier] = None) -> ProcessWeatherBatchUseCase:
    """Monta o use case com os adapters padrão"""
    return ProcessWeatherBatchUseCase(
        location_repository=get_location_repository(),
        weather_provider=get_openmeteo_provider(),
        sink=TextFileObservationSink(),
        threshold_evaluator=ThresholdEvaluator(notifier or get_notifier())
    )


def run(use_case: Optional[ProcessWeatherBatchUseCase] = None) -> Optional[BatchReport]:
    """
    Executa uma passada completa
    
    Returns:
        BatchReport, ou None se o batch foi abortado
    """
    use_case = use_case or build_use_case()
    
    logger.info("Fetching weather data...")
    try:
        report = use_case.execute()
    except AllocationError as e:
        logger.error("Batch abortado", error=str(e), details=e.details)
        return None
    
    logger.info(
        "Weather data processing complete.",
        average_wind_speed=f"{report.aggregate.mean_wind_speed:.2f}",
        failures=report.failures
    )
    return report


def main() -> int:
    """Exit code 0 ao concluir a passada, mesmo com falhas por localização"""
    report = run()
    return 0 if report is not None else 1


if __name__ == '__main__':
    sys.exit(main())
