"""
Translation data models
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .languages import LanguageOption, Provider, WordClass


@dataclass(frozen=True)
class Credentials:
    """Secret(s) for a single provider"""
    api_key: str = field(default="", repr=False)
    secret: Optional[str] = field(default=None, repr=False)  # Youdao app secret

    def is_blank(self, provider: Provider) -> bool:
        if not self.api_key or not self.api_key.strip():
            return True
        if provider.requires_secret:
            return not self.secret or not self.secret.strip()
        return False


@dataclass(frozen=True)
class TranslationRequest:
    """A single translate / analyze request"""
    text: str
    source_language: LanguageOption
    target_language: LanguageOption
    provider: Provider
    model: str
    credentials: Credentials = field(default_factory=Credentials, compare=False)

    def __post_init__(self):
        if self.target_language is LanguageOption.AUTO:
            raise ValueError("target language cannot be auto")

    @property
    def normalized_text(self) -> str:
        return self.text.strip()

    def with_source(self, language: LanguageOption) -> "TranslationRequest":
        """Copy of this request with the source language overridden"""
        return replace(self, source_language=language)


@dataclass(frozen=True)
class TranslationResult:
    """Translation result handed to the presentation layer"""
    original_text: str
    translated_text: str
    detected_source_label: str
    target_label: str


@dataclass(frozen=True)
class ProviderTranslation:
    """Raw outcome of an adapter call, before the orchestrator labels it"""
    translated_text: str
    detected_source: Optional[str] = None  # provider-reported language code


@dataclass(frozen=True)
class ComponentID:
    """Span identity used for selection state"""
    start: int
    end: int


class ComponentKind(str, Enum):
    WORD = "word"
    PHRASE = "phrase"


@dataclass(frozen=True)
class Component:
    """A word or phrase inside an analysed sentence (UTF-16 offsets)"""
    text: str
    translation: str
    word_class: WordClass
    start: int
    end: int
    kind: ComponentKind = ComponentKind.WORD
    lemmatized_form: Optional[str] = None

    @property
    def id(self) -> ComponentID:
        return ComponentID(self.start, self.end)


@dataclass(frozen=True)
class SentenceAnalysis:
    components: Tuple[Component, ...]

    def selected_components(self, selected_ids: Iterable[ComponentID]) -> List[Component]:
        """Components in the selection, in reading order"""
        wanted = set(selected_ids)
        return [
            component
            for component in sorted(self.components, key=lambda c: c.start)
            if component.id in wanted
        ]


@dataclass(frozen=True)
class WordSense:
    word_class: WordClass
    translations: Tuple[str, ...]

    def display_line(self) -> str:
        return f"{self.word_class.value} {'; '.join(self.translations)}"


@dataclass(frozen=True)
class WordSenseList:
    senses: Tuple[WordSense, ...]

    def display_lines(self) -> List[str]:
        return [sense.display_line() for sense in self.senses]


AnalysisResult = Union[SentenceAnalysis, WordSenseList]


@dataclass(frozen=True)
class RenderSegment:
    """A slice of the original text; interactive when tied to a component"""
    text: str
    component_id: Optional[ComponentID] = None

    @property
    def is_interactive(self) -> bool:
        return self.component_id is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "component": (
                {"start": self.component_id.start, "end": self.component_id.end}
                if self.component_id else None
            ),
        }
