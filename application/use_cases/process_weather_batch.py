"""
Use Case: Process Weather Batch
Coleta sequencial do tempo atual, persistência, alertas e média do vento
"""
from dataclasses import dataclass
from typing import List, Optional

from ddtrace.trace import tracer

from application.ports.output.location_repository_port import ILocationRepository
from application.ports.output.observation_sink_port import IObservationSink
from application.ports.output.weather_provider_port import IWeatherProvider
from application.services.threshold_evaluator import ThresholdEvaluator
from domain.entities.location import Location
from domain.entities.observation import Observation
from domain.exceptions import AllocationError, FetchError, FileOpenError, ParseError
from domain.services.wind_speed_aggregator import aggregate_wind_speed
from domain.value_objects.aggregate_result import AggregateResult
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


@dataclass
class BatchReport:
    """Resultado de uma execução completa"""
    observations: List[Observation]
    aggregate: AggregateResult
    failures: int = 0  # localizações que caíram na observação padrão
    
    def to_dict(self) -> dict:
        return {
            'observations': [obs.to_dict() for obs in self.observations],
            'aggregate': self.aggregate.to_dict(),
            'failures': self.failures
        }


class ProcessWeatherBatchUseCase:
    """
    Use case: percorre o registro de localizações em ordem, uma por vez
    
    Para cada localização: fetch -> parse -> gravação bruta -> limites.
    Falhas de fetch/parse viram uma observação padrão e nunca abortam o batch,
    de modo que sempre existe uma observação por localização.
    """
    
    def __init__(
        self,
        location_repository: ILocationRepository,
        weather_provider: IWeatherProvider,
        sink: IObservationSink,
        threshold_evaluator: ThresholdEvaluator,
        mapper: Optional[type] = None
    ):
        self.location_repository = location_repository
        self.weather_provider = weather_provider
        self.sink = sink
        self.threshold_evaluator = threshold_evaluator
        self.mapper = mapper or OpenMeteoDataMapper
    
    @tracer.wrap(resource="use_case.process_weather_batch")
    def execute(self) -> BatchReport:
        """
        Executa o batch completo
        
        Returns:
            BatchReport com as observações e a média
        
        Raises:
            AllocationError: Se o buffer do batch não puder ser alocado
        """
        locations = self.location_repository.get_all()
        location_count = len(locations)
        
        try:
            observations = self._allocate_buffer(location_count)
        except MemoryError as e:
            raise AllocationError(
                "Falha ao alocar memória para o batch",
                details={'location_count': location_count}
            ) from e
        
        logger.info(
            "Iniciando coleta do tempo atual",
            total_localizacoes=location_count,
            provider=self.weather_provider.provider_name
        )
        
        failures = 0
        for index, location in enumerate(locations):
            observation, failed = self._observe(location)
            failures += failed
            observations[index] = observation
            
            self._write_raw(observation)
            self.threshold_evaluator.check(observation)
        
        aggregate = aggregate_wind_speed(observations, location_count)
        
        logger.info(
            "Média da velocidade do vento calculada",
            average_wind_speed=round(aggregate.mean_wind_speed, 2),
            localizacoes=location_count,
            falhas=failures
        )
        
        self._write_processed(aggregate)
        
        return BatchReport(observations=observations, aggregate=aggregate, failures=failures)
    
    @staticmethod
    def _allocate_buffer(size: int) -> List[Optional[Observation]]:
        return [None] * size
    
    def observe(self, location: Location) -> Observation:
        """Fetch + parse de uma localização (falhas viram observação padrão)"""
        observation, _ = self._observe(location)
        return observation
    
    def _observe(self, location: Location):
        try:
            raw = self.weather_provider.fetch_current_weather(location)
            observation = self.mapper.map_current_weather(raw, location.name)
        except FetchError as e:
            logger.error(
                "Falha ao buscar tempo atual",
                location=location.to_dict(),
                error_type=type(e).__name__,
                error=str(e)
            )
            return Observation.default_for(location.name), 1
        except ParseError as e:
            logger.error(
                "Falha ao interpretar resposta",
                location=location.to_dict(),
                error_type=type(e).__name__,
                error=str(e)
            )
            return Observation.default_for(location.name), 1
        
        return observation, 0
    
    def _write_raw(self, observation: Observation) -> None:
        try:
            self.sink.write_raw(observation)
        except FileOpenError as e:
            logger.error("Falha ao gravar dado bruto", city=observation.location_name, path=e.path, error=str(e))
    
    def _write_processed(self, aggregate: AggregateResult) -> None:
        try:
            self.sink.write_processed(aggregate)
        except FileOpenError as e:
            logger.error("Falha ao gravar dado processado", path=e.path, error=str(e))
