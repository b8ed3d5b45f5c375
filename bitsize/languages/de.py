"""
German duration strings.
"""

LANGUAGE = {
    "language_code": "de",
    "language_name": "Deutsch",
    "time": {
        "format": "{value} {unit}",
        "separator": " und ",
        "less_than_second": "weniger als eine Sekunde",
        "second": "Sekunde",
        "seconds": "Sekunden",
        "minute": "Minute",
        "minutes": "Minuten",
        "hour": "Stunde",
        "hours": "Stunden",
        "day": "Tag",
        "days": "Tage",
    },
}
