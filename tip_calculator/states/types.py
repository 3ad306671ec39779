from typing import TypedDict


class LocaleOption(TypedDict):
    code: str
    name: str
