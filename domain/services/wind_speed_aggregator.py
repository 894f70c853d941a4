"""
Agregação da velocidade do vento sobre o batch
"""
from functools import reduce
from typing import Iterable

from domain.entities.observation import Observation
from domain.value_objects.aggregate_result import AggregateResult


def total_wind_speed(observations: Iterable[Observation]) -> float:
    """Soma das velocidades do vento (fold sobre a sequência)"""
    return reduce(lambda acc, obs: acc + obs.wind_speed_10m, observations, 0.0)


def aggregate_wind_speed(observations: Iterable[Observation], location_count: int) -> AggregateResult:
    """
    Calcula a média da velocidade do vento do batch
    
    O divisor é sempre o tamanho do registro de localizações, e não o número
    de coletas bem-sucedidas: falhas entram com 0.0 e puxam a média para baixo.
    
    Args:
        observations: Uma observação por localização
        location_count: Tamanho do registro
    
    Returns:
        AggregateResult (média 0.0 quando o registro está vazio)
    """
    if location_count <= 0:
        return AggregateResult(mean_wind_speed=0.0, location_count=0)
    
    return AggregateResult(
        mean_wind_speed=total_wind_speed(observations) / location_count,
        location_count=location_count
    )
