"""Condition classifier: weather condition to backdrop theme and particle overlay."""

from skyview.models.common import ConditionCategory
from skyview.models.display import ParticleEffect, Theme, ThemeKey

NIGHT_MARKER = "n"

_THEMES: dict[str, ThemeKey] = {
    ConditionCategory.CLEAR.lower(): ThemeKey.CLEAR,
    ConditionCategory.CLOUDS.lower(): ThemeKey.CLOUDS,
    ConditionCategory.RAIN.lower(): ThemeKey.RAIN,
    ConditionCategory.DRIZZLE.lower(): ThemeKey.DRIZZLE,
    ConditionCategory.THUNDERSTORM.lower(): ThemeKey.THUNDERSTORM,
    ConditionCategory.SNOW.lower(): ThemeKey.SNOW,
    ConditionCategory.MIST.lower(): ThemeKey.MIST,
    ConditionCategory.FOG.lower(): ThemeKey.FOG,
    ConditionCategory.HAZE.lower(): ThemeKey.HAZE,
    ConditionCategory.SMOKE.lower(): ThemeKey.SMOKE,
}

# Only Clear has a night variant so far.
_NIGHT_THEMES: dict[ThemeKey, ThemeKey] = {
    ThemeKey.CLEAR: ThemeKey.CLEAR_NIGHT,
}

_PARTICLES: dict[str, ParticleEffect] = {
    ConditionCategory.RAIN.lower(): ParticleEffect.RAIN,
    ConditionCategory.DRIZZLE.lower(): ParticleEffect.RAIN,
    ConditionCategory.THUNDERSTORM.lower(): ParticleEffect.RAIN,
    ConditionCategory.SNOW.lower(): ParticleEffect.SNOW,
}


def is_night(icon: str | None) -> bool:
    return bool(icon) and icon.endswith(NIGHT_MARKER)


def classify(condition: str | None, icon: str | None) -> Theme:
    """Map a provider condition and icon code to a theme.

    Unknown conditions fall back to the default theme with no particles.
    """
    key = (condition or "").strip().lower()
    theme = _THEMES.get(key, ThemeKey.DEFAULT)
    if is_night(icon):
        theme = _NIGHT_THEMES.get(theme, theme)
    return Theme(key=theme, particles=_PARTICLES.get(key, ParticleEffect.NONE))
