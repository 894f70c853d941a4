"""
Domain Constants - Todas as constantes do batch centralizadas
"""


class API:
    """Constantes de APIs externas"""

    # Open-Meteo
    OPENMETEO_BASE_URL = "https://api.open-meteo.com/v1"
    OPENMETEO_FORECAST_URL = f"{OPENMETEO_BASE_URL}/forecast"

    # Séries horárias pedidas junto com o bloco current_weather
    HOURLY_VARIABLES = ("windspeed_10m", "temperature_2m")

    # Casas decimais de latitude/longitude na query
    COORDINATE_PRECISION = 4


class Thresholds:
    """Limites fixos que disparam alertas (estritamente maior que)"""

    WIND_SPEED = 20.0  # m/s
    TEMPERATURE = 20.0  # °C


class Alerts:
    """Constantes de alertas"""

    # Capacidade da mensagem (256 com terminador no job original)
    MAX_MESSAGE_LENGTH = 255

    HIGH_WIND = "HIGH_WIND"
    HIGH_TEMPERATURE = "HIGH_TEMPERATURE"


class Output:
    """Formatos das linhas persistidas"""

    RAW_LINE = "City: {name}, Wind Speed: {wind:.2f}, Temperature: {temperature:.2f}, Is Day: {is_day}"
    PROCESSED_LINE = "Average Wind Speed: {average:.2f}"
