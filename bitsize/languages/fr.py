"""
French duration strings.
"""

LANGUAGE = {
    "language_code": "fr",
    "language_name": "Français",
    "time": {
        "format": "{value} {unit}",
        "separator": " et ",
        "less_than_second": "moins d'une seconde",
        "second": "seconde",
        "seconds": "secondes",
        "minute": "minute",
        "minutes": "minutes",
        "hour": "heure",
        "hours": "heures",
        "day": "jour",
        "days": "jours",
    },
}
