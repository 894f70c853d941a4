"""Observation Sink Port - Interface para persistência dos resultados"""
from abc import ABC, abstractmethod

from domain.entities.observation import Observation
from domain.value_objects.aggregate_result import AggregateResult


class IObservationSink(ABC):
    """
    Persistência append-only do batch
    
    Implementações devem lançar FileOpenError quando o destino
    não puder ser aberto ou escrito.
    """

    @abstractmethod
    def write_raw(self, observation: Observation) -> None:
        """Grava uma linha por observação"""
        pass

    @abstractmethod
    def write_processed(self, result: AggregateResult) -> None:
        """Grava uma linha por execução com o agregado"""
        pass
