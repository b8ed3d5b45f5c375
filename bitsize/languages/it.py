"""
Italian duration strings.
"""

LANGUAGE = {
    "language_code": "it",
    "language_name": "Italiano",
    "time": {
        "format": "{value} {unit}",
        "separator": " e ",
        "less_than_second": "meno di un secondo",
        "second": "secondo",
        "seconds": "secondi",
        "minute": "minuto",
        "minutes": "minuti",
        "hour": "ora",
        "hours": "ore",
        "day": "giorno",
        "days": "giorni",
    },
}
