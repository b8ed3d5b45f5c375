"""
Chinese duration strings, no plural forms and no spaces.
"""


def plural(count: int, unit: str) -> str:
    return f"{unit}s"


LANGUAGE = {
    "language_code": "zh",
    "language_name": "中文",
    "time": {
        "format": "{value}{unit}",
        "separator": "",
        "less_than_second": "不到一秒",
        "seconds": "秒",
        "minutes": "分钟",
        "hours": "小时",
        "days": "天",
        "plural_function": plural,
    },
}
