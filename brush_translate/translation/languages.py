"""
Language, provider and word-class catalogues
"""
from enum import Enum
from typing import List, Optional


UNKNOWN_LANGUAGE_LABEL = "Unknown language"


class LanguageOption(str, Enum):
    """Languages offered for source / target selection"""
    AUTO = "auto"
    SIMPLIFIED_CHINESE = "zh-Hans"
    TRADITIONAL_CHINESE = "zh-Hant"
    ENGLISH = "en"
    JAPANESE = "ja"
    KOREAN = "ko"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _LANGUAGE_NAMES[self]

    @property
    def english_name(self) -> str:
        """Name used inside model prompts"""
        return _PROMPT_NAMES[self]

    @property
    def is_chinese(self) -> bool:
        return self in (LanguageOption.SIMPLIFIED_CHINESE, LanguageOption.TRADITIONAL_CHINESE)

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["LanguageOption"]:
        """
        Map a language code (detector or provider style) onto the catalogue.

        zh-cn / zh-sg / zh-hans map to Simplified Chinese, zh-tw / zh-hk /
        zh-hant to Traditional Chinese, a bare "zh" to Simplified Chinese.
        """
        if not code:
            return None
        normalized = code.strip().replace("_", "-").lower()
        if normalized in ("zh", "zh-cn", "zh-sg", "zh-hans", "zh-chs"):
            return cls.SIMPLIFIED_CHINESE
        if normalized in ("zh-tw", "zh-hk", "zh-mo", "zh-hant", "zh-cht"):
            return cls.TRADITIONAL_CHINESE
        for option in cls:
            if option.value.lower() == normalized:
                return option
        # Regional variants such as en-US or pt-BR
        base = normalized.split("-")[0]
        for option in cls:
            if option is not cls.AUTO and option.value.lower() == base:
                return option
        return None

    @classmethod
    def targets(cls) -> List["LanguageOption"]:
        return [option for option in cls if option is not cls.AUTO]


_LANGUAGE_NAMES = {
    LanguageOption.AUTO: "Auto detect",
    LanguageOption.SIMPLIFIED_CHINESE: "Chinese (Simplified)",
    LanguageOption.TRADITIONAL_CHINESE: "Chinese (Traditional)",
    LanguageOption.ENGLISH: "English",
    LanguageOption.JAPANESE: "Japanese",
    LanguageOption.KOREAN: "Korean",
    LanguageOption.SPANISH: "Spanish",
    LanguageOption.FRENCH: "French",
    LanguageOption.GERMAN: "German",
}

_PROMPT_NAMES = {
    LanguageOption.AUTO: "the detected source language",
    LanguageOption.SIMPLIFIED_CHINESE: "Simplified Chinese",
    LanguageOption.TRADITIONAL_CHINESE: "Traditional Chinese",
    LanguageOption.ENGLISH: "English",
    LanguageOption.JAPANESE: "Japanese",
    LanguageOption.KOREAN: "Korean",
    LanguageOption.SPANISH: "Spanish",
    LanguageOption.FRENCH: "French",
    LanguageOption.GERMAN: "German",
}


def display_name_for_code(code: Optional[str]) -> str:
    """Human label for a detected language code"""
    option = LanguageOption.from_code(code)
    if option is None or option is LanguageOption.AUTO:
        return UNKNOWN_LANGUAGE_LABEL
    return option.display_name


class Provider(str, Enum):
    """Translation backends"""
    DEEPSEEK = "deepseek"
    DOUBAO = "doubao"
    GEMINI = "gemini"
    YOUDAO = "youdao"

    @property
    def display_name(self) -> str:
        return _PROVIDER_INFO[self]["name"]

    @property
    def models(self) -> List[str]:
        return list(_PROVIDER_INFO[self]["models"])

    @property
    def default_model(self) -> str:
        models = self.models
        return models[0] if models else ""

    @property
    def requires_secret(self) -> bool:
        """Signed REST providers need an app secret next to the key"""
        return self is Provider.YOUDAO


_PROVIDER_INFO = {
    Provider.DEEPSEEK: {
        "name": "DeepSeek",
        "models": ["deepseek-chat"],
    },
    Provider.DOUBAO: {
        "name": "Doubao",
        "models": [
            "doubao-seed-translation-250915",
            "doubao-seed-1-6-flash-250828",
            "doubao-seed-1-6-vision-250815",
            "doubao-seed-1-6-251015",
        ],
    },
    Provider.GEMINI: {
        "name": "Gemini",
        "models": ["gemini-2.5-pro"],
    },
    Provider.YOUDAO: {
        "name": "Youdao",
        "models": ["youdao-text"],
    },
}


class WordClass(str, Enum):
    """Part-of-speech tags a model may attach to a component"""
    NOUN = "n."
    VERB = "v."
    ADJECTIVE = "adj."
    ADVERB = "adv."
    NUMERAL = "num."
    PRONOUN = "pron."
    ARTICLE = "art."
    PREPOSITION = "prep."
    CONJUNCTION = "conj."
    INTERJECTION = "int."

    @property
    def display_name(self) -> str:
        return _WORD_CLASS_NAMES[self]

    @classmethod
    def parse(cls, value: str) -> "WordClass":
        """
        Normalize a model-supplied tag.

        Accepts the canonical abbreviation, the abbreviation without its
        trailing dot, or the spelled-out English name. Raises ValueError for
        anything else.
        """
        cleaned = (value or "").strip().lower()
        if not cleaned:
            raise ValueError("empty word class")
        if not cleaned.endswith("."):
            alias = _WORD_CLASS_ALIASES.get(cleaned)
            if alias is not None:
                return alias
            cleaned = f"{cleaned}."
        for member in cls:
            if member.value == cleaned:
                return member
        raise ValueError(f"unknown word class: {value!r}")


_WORD_CLASS_NAMES = {
    WordClass.NOUN: "noun",
    WordClass.VERB: "verb",
    WordClass.ADJECTIVE: "adjective",
    WordClass.ADVERB: "adverb",
    WordClass.NUMERAL: "numeral",
    WordClass.PRONOUN: "pronoun",
    WordClass.ARTICLE: "article",
    WordClass.PREPOSITION: "preposition",
    WordClass.CONJUNCTION: "conjunction",
    WordClass.INTERJECTION: "interjection",
}

_WORD_CLASS_ALIASES = {name: member for member, name in _WORD_CLASS_NAMES.items()}
_WORD_CLASS_ALIASES.update({
    "determiner": WordClass.ARTICLE,
    "number": WordClass.NUMERAL,
    "interj": WordClass.INTERJECTION,
})
