"""
Spanish duration strings.
"""

LANGUAGE = {
    "language_code": "es",
    "language_name": "Español",
    "time": {
        "format": "{value} {unit}",
        "separator": " y ",
        "less_than_second": "menos de un segundo",
        "second": "segundo",
        "seconds": "segundos",
        "minute": "minuto",
        "minutes": "minutos",
        "hour": "hora",
        "hours": "horas",
        "day": "día",
        "days": "días",
    },
}
