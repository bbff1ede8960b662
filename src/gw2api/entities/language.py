"""Response language."""

from enum import Enum


class Language(Enum):
    """All languages the API can localize responses into.

    The default language is English.
    """

    EN = "en"
    ES = "es"
    DE = "de"
    FR = "fr"
    ZH = "zh"

    def __str__(self) -> str:
        return self.value
