"""
Japanese duration strings, no plural forms and no spaces.
"""


def plural(count: int, unit: str) -> str:
    return f"{unit}s"


LANGUAGE = {
    "language_code": "ja",
    "language_name": "日本語",
    "time": {
        "format": "{value}{unit}",
        "separator": "",
        "less_than_second": "1秒未満",
        "seconds": "秒",
        "minutes": "分",
        "hours": "時間",
        "days": "日",
        "plural_function": plural,
    },
}
