"""Extreme temperature alerts."""

from skyview.forecast.units import round_temp
from skyview.models.display import Alert, AlertState

HEAT_THRESHOLD_C = 40.0
COLD_THRESHOLD_C = -20.0


def evaluate(
    temp_c: float,
    heat_threshold: float = HEAT_THRESHOLD_C,
    cold_threshold: float = COLD_THRESHOLD_C,
) -> AlertState:
    """Both bounds are exclusive. NaN compares false and maps to NONE."""
    if temp_c > heat_threshold:
        return AlertState.HEAT_EXTREME
    if temp_c < cold_threshold:
        return AlertState.COLD_EXTREME
    return AlertState.NONE


def build_alert(
    temp_c: float,
    heat_threshold: float = HEAT_THRESHOLD_C,
    cold_threshold: float = COLD_THRESHOLD_C,
) -> Alert:
    state = evaluate(temp_c, heat_threshold, cold_threshold)
    if state == AlertState.HEAT_EXTREME:
        return Alert(
            state,
            f"Extreme Heat Warning! Temperature is {round_temp(temp_c)}°C. "
            "Stay hydrated and avoid direct sun exposure.",
        )
    if state == AlertState.COLD_EXTREME:
        return Alert(
            state,
            f"Extreme Cold Warning! Temperature is {round_temp(temp_c)}°C. "
            "Dress warmly and limit time outdoors.",
        )
    return Alert(state)
