"""
English duration strings.
"""

LANGUAGE = {
    "language_code": "en",
    "language_name": "English",
    "time": {
        "format": "{value} {unit}",
        "separator": ", ",
        "less_than_second": "less than a second",
        "second": "second",
        "seconds": "seconds",
        "minute": "minute",
        "minutes": "minutes",
        "hour": "hour",
        "hours": "hours",
        "day": "day",
        "days": "days",
    },
}
