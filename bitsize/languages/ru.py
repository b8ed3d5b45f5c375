"""
Russian duration strings.

Russian has three plural forms: 1, 21, 31 ... take the singular ("секунда"),
2-4, 22-24 ... take the "few" form ("секунды"), the rest the "many" form ("секунд").
"""


def plural(count: int, unit: str) -> str:
    mod10 = count % 10
    mod100 = count % 100
    if mod10 == 1 and mod100 != 11:
        return unit
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return f"{unit}_few"
    return f"{unit}s"


LANGUAGE = {
    "language_code": "ru",
    "language_name": "Русский",
    "time": {
        "format": "{value} {unit}",
        "separator": " и ",
        "less_than_second": "менее секунды",
        "second": "секунда",
        "second_few": "секунды",
        "seconds": "секунд",
        "minute": "минута",
        "minute_few": "минуты",
        "minutes": "минут",
        "hour": "час",
        "hour_few": "часа",
        "hours": "часов",
        "day": "день",
        "day_few": "дня",
        "days": "дней",
        "plural_function": plural,
    },
}
