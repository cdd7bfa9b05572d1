"""Static weather code lookup."""

from typing import List, Optional, Sequence

WEATHER_NAMES: List[str] = [
    "Void",
    "Sunny",
    "Overcast",
    "Rainy",
    "Sandstorm",
    "Snowy",
    "Acidic",
    "Solar Eclipse",
    "Glitter",
    "Bloodwind",
    "Peanuts",
    "Birds",
    "Feedback",
    "Reverb",
]


class WeatherLookup:
    """Maps integer weather codes to display labels."""

    def __init__(self, names: Optional[Sequence[str]] = None):
        self.names = list(names) if names is not None else list(WEATHER_NAMES)

    def label(self, code: int) -> str:
        """Return the weather label, or an empty string for unknown codes."""
        if 0 <= code < len(self.names):
            return self.names[code] or ""
        return ""
