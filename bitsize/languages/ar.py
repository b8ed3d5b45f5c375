"""
Arabic duration strings.

Counts of 1 and 2 take the singular, 3 to 10 the plural, 0 and 11+ the
singular accusative used after large numbers.
"""


def plural(count: int, unit: str) -> str:
    if count in (1, 2):
        return unit
    if 3 <= count <= 10:
        return f"{unit}s"
    return f"{unit}s_many"


LANGUAGE = {
    "language_code": "ar",
    "language_name": "العربية",
    "time": {
        "format": "{value} {unit}",
        "separator": " و ",
        "less_than_second": "أقل من ثانية",
        "second": "ثانية",
        "seconds": "ثوان",
        "seconds_many": "ثانية",
        "minute": "دقيقة",
        "minutes": "دقائق",
        "minutes_many": "دقيقة",
        "hour": "ساعة",
        "hours": "ساعات",
        "hours_many": "ساعة",
        "day": "يوم",
        "days": "أيام",
        "days_many": "يوم",
        "plural_function": plural,
    },
}
