# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Country, language and freshness codes accepted by the Brave API."""

from __future__ import annotations

from enum import Enum


class _CodeEnum(str, Enum):
    """String enum whose value is the code sent over the wire."""

    @classmethod
    def parse(cls, value: str | _CodeEnum) -> _CodeEnum:
        if isinstance(value, cls):
            return value
        code = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == code:
                return member
        raise ValueError(f"Unknown {cls.__name__.lower()} code {value!r}")

    def __str__(self) -> str:
        return self.value


class Country(_CodeEnum):
    ALL = "ALL"
    ARGENTINA = "AR"
    AUSTRALIA = "AU"
    AUSTRIA = "AT"
    BELGIUM = "BE"
    BRAZIL = "BR"
    CANADA = "CA"
    CHILE = "CL"
    CHINA = "CN"
    DENMARK = "DK"
    FINLAND = "FI"
    FRANCE = "FR"
    GERMANY = "DE"
    HONG_KONG = "HK"
    INDIA = "IN"
    INDONESIA = "ID"
    ITALY = "IT"
    JAPAN = "JP"
    KOREA = "KR"
    MALAYSIA = "MY"
    MEXICO = "MX"
    NETHERLANDS = "NL"
    NEW_ZEALAND = "NZ"
    NORWAY = "NO"
    PHILIPPINES = "PH"
    POLAND = "PL"
    PORTUGAL = "PT"
    RUSSIA = "RU"
    SAUDI_ARABIA = "SA"
    SOUTH_AFRICA = "ZA"
    SPAIN = "ES"
    SWEDEN = "SE"
    SWITZERLAND = "CH"
    TAIWAN = "TW"
    TURKEY = "TR"
    UNITED_KINGDOM = "GB"
    UNITED_STATES = "US"


class Language(_CodeEnum):
    ARABIC = "ar"
    BASQUE = "eu"
    BENGALI = "bn"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE_SIMPLIFIED = "zh-hans"
    CHINESE_TRADITIONAL = "zh-hant"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_UK = "en-gb"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    GERMAN = "de"
    GUJARATI = "gu"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    ITALIAN = "it"
    JAPANESE = "jp"
    KANNADA = "kn"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MALAY = "ms"
    MALAYALAM = "ml"
    MARATHI = "mr"
    NORWEGIAN_BOKMAL = "nb"
    POLISH = "pl"
    PORTUGUESE_BRAZIL = "pt-br"
    PORTUGUESE_PORTUGAL = "pt-pt"
    PUNJABI = "pa"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"


# The API has no filter narrower than a day; HOUR is sent as the day filter.
_FRESHNESS_CODES = {
    "hour": "pd",
    "day": "pd",
    "week": "pw",
    "month": "pm",
    "year": "py",
}


class Freshness(_CodeEnum):
    """Recency window for news results."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | _CodeEnum) -> Freshness:
        text = str(value).strip().lower()
        for name, code in _FRESHNESS_CODES.items():
            if text == code and name != "hour":
                return cls(name)
        return super().parse(value)  # type: ignore[return-value]

    @property
    def code(self) -> str:
        return _FRESHNESS_CODES[self.value]


__all__ = ["Country", "Freshness", "Language"]
