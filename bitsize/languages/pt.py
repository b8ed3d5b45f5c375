"""
Portuguese duration strings.
"""

LANGUAGE = {
    "language_code": "pt",
    "language_name": "Português",
    "time": {
        "format": "{value} {unit}",
        "separator": " e ",
        "less_than_second": "menos de um segundo",
        "second": "segundo",
        "seconds": "segundos",
        "minute": "minuto",
        "minutes": "minutos",
        "hour": "hora",
        "hours": "horas",
        "day": "dia",
        "days": "dias",
    },
}
