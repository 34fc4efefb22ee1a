"""OpenWeatherMap condition id -> internal condition code mapping.

Internal codes follow the classic 0-47 weather condition taxonomy used by
display clients. ``UNKNOWN_CONDITION`` marks an id without a mapping.
"""

from __future__ import annotations

from types import MappingProxyType

UNKNOWN_CONDITION = -1

# Ids whose code depends on the icon's day/night suffix: id -> (day, night).
DAY_NIGHT_CONDITION_CODES = MappingProxyType(
    {
        800: (32, 31),  # clear sky
        801: (34, 33),  # few clouds
        802: (28, 27),  # scattered clouds
        803: (30, 29),  # broken clouds
        804: (30, 29),  # overcast clouds
    }
)

CONDITION_CODES = MappingProxyType(
    {
        # Thunderstorm
        202: 4,  # thunderstorm with heavy rain
        232: 4,  # thunderstorm with heavy drizzle
        211: 4,  # thunderstorm
        212: 3,  # heavy thunderstorm
        221: 38,  # ragged thunderstorm
        231: 38,  # thunderstorm with drizzle
        201: 38,  # thunderstorm with rain
        230: 37,  # thunderstorm with light drizzle
        200: 37,  # thunderstorm with light rain
        210: 37,  # light thunderstorm
        # Drizzle
        300: 9,
        301: 9,
        302: 9,
        310: 9,
        311: 9,
        312: 9,
        313: 9,
        314: 9,
        321: 9,
        # Rain
        500: 11,  # light rain
        501: 11,  # moderate rain
        520: 11,  # light intensity shower rain
        521: 11,  # shower rain
        531: 11,  # ragged shower rain
        502: 12,  # heavy intensity rain
        503: 12,  # very heavy rain
        504: 12,  # extreme rain
        522: 12,  # heavy intensity shower rain
        511: 10,  # freezing rain
        # Snow
        600: 14,  # light snow
        620: 14,
        601: 16,  # snow
        621: 16,
        602: 41,  # heavy snow
        622: 41,
        611: 18,  # sleet
        612: 18,
        615: 5,  # rain and snow
        616: 5,
        # Atmosphere
        741: 20,  # fog
        711: 22,  # smoke
        762: 22,  # volcanic ash
        701: 21,  # mist
        721: 21,  # haze
        731: 19,  # sand/dust whirls
        751: 19,  # sand
        761: 19,  # dust
        771: 23,  # squalls
        781: 0,  # tornado
        # Extreme
        900: 0,  # tornado
        901: 1,  # tropical storm
        902: 2,  # hurricane
        903: 25,  # cold
        904: 36,  # hot
        905: 24,  # windy
        906: 17,  # hail
    }
)


def is_night_icon(icon: str) -> bool:
    return icon.endswith("n")


def map_condition_code(icon: str, condition_id: int) -> int:
    """Return the internal condition code for an OpenWeatherMap condition.

    ``icon`` is the provider icon name (``"01d"``, ``"04n"``, ...); only its
    day/night suffix is inspected, and only for the clear/cloud ids.
    """
    day_night = DAY_NIGHT_CONDITION_CODES.get(condition_id)
    if day_night is not None:
        day, night = day_night
        return night if is_night_icon(icon) else day
    return CONDITION_CODES.get(condition_id, UNKNOWN_CONDITION)
