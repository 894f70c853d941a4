"""Open-Meteo mappers"""
from infrastructure.adapters.output.providers.openmeteo.mappers.openmeteo_data_mapper import OpenMeteoDataMapper

__all__ = ['OpenMeteoDataMapper']
