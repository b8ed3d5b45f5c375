"""
Dutch duration strings.
"""

LANGUAGE = {
    "language_code": "nl",
    "language_name": "Nederlands",
    "time": {
        "format": "{value} {unit}",
        "separator": " en ",
        "less_than_second": "minder dan een seconde",
        "second": "seconde",
        "seconds": "seconden",
        "minute": "minuut",
        "minutes": "minuten",
        "hour": "uur",
        "hours": "uur",  # same word for singular and plural
        "day": "dag",
        "days": "dagen",
    },
}
