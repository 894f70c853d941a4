"""
Text File Sink - Persistência append-only em arquivos texto
"""
from pathlib import Path
from typing import Union

from application.ports.output.observation_sink_port import IObservationSink
from domain.constants import Output
from domain.entities.observation import Observation
from domain.exceptions import FileOpenError
from domain.value_objects.aggregate_result import AggregateResult
from shared.config import settings


class TextFileObservationSink(IObservationSink):
    """
    Grava observações e agregados em dois logs texto
    
    - raw: uma linha por localização por execução
    - processed: uma linha por execução
    Arquivos são criados se ausentes e nunca truncados.
    """
    
    def __init__(
        self,
        raw_path: Union[str, Path] = None,
        processed_path: Union[str, Path] = None
    ):
        self.raw_path = Path(raw_path or settings.RAW_DATA_FILE)
        self.processed_path = Path(processed_path or settings.PROCESSED_DATA_FILE)
    
    @staticmethod
    def format_raw(observation: Observation) -> str:
        return Output.RAW_LINE.format(
            name=observation.location_name,
            wind=observation.wind_speed_10m,
            temperature=observation.temperature_2m,
            is_day=observation.is_day
        )
    
    @staticmethod
    def format_processed(result: AggregateResult) -> str:
        return Output.PROCESSED_LINE.format(average=result.mean_wind_speed)
    
    def write_raw(self, observation: Observation) -> None:
        self._append(self.raw_path, self.format_raw(observation))
    
    def write_processed(self, result: AggregateResult) -> None:
        self._append(self.processed_path, self.format_processed(result))
    
    @staticmethod
    def _append(path: Path, line: str) -> None:
        try:
            with open(path, 'a', encoding='utf-8') as f:
                f.write(line + '\n')
        except OSError as e:
            raise FileOpenError(
                f"Falha ao abrir {path}: {e}",
                path=str(path),
                details={'error': str(e)}
            ) from e
