"""
Structured-output decoding for LLM replies

Models do not reliably honor "pure JSON" instructions, so the outermost
{...} span is cut out of the reply (tolerating markdown fences or prose)
before decoding it against the expected schema.
"""
import json
from enum import Enum
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from .errors import AnalyzeFailedError, InvalidResponseError, ServiceError
from .languages import WordClass
from .models import (
    AnalysisResult,
    Component,
    ComponentKind,
    SentenceAnalysis,
    WordSense,
    WordSenseList,
)


STATE_SUCCESS = 1
STATE_FAILURE = 0
MAX_SENSE_TRANSLATIONS = 3


class TextType(str, Enum):
    WORD = "word"
    SENTENCE = "sentence"


class TranslationPayload(BaseModel):
    """Translation schema"""
    state: int
    error_message: Optional[str] = Field(
        default="", validation_alias=AliasChoices("error_message", "errorMessage")
    )
    translate_result: Optional[str] = Field(
        default="", validation_alias=AliasChoices("translate_result", "translateResult")
    )


class ComponentPayload(BaseModel):
    text: str
    translation: str = ""
    word_class: WordClass = Field(validation_alias=AliasChoices("word_class", "wordClass"))
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    lemmatized_form: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("lemmatized_form", "lemmatizedForm")
    )
    kind: ComponentKind = ComponentKind.WORD

    @field_validator("word_class", mode="before")
    @classmethod
    def _normalize_word_class(cls, value: Any) -> WordClass:
        if isinstance(value, WordClass):
            return value
        return WordClass.parse(str(value))

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        if value is None or value == "":
            return ComponentKind.WORD
        return str(value).strip().lower()


class WordPartPayload(BaseModel):
    word_class: WordClass = Field(validation_alias=AliasChoices("word_class", "wordClass"))
    translations: List[str] = Field(default_factory=list)

    @field_validator("word_class", mode="before")
    @classmethod
    def _normalize_word_class(cls, value: Any) -> WordClass:
        if isinstance(value, WordClass):
            return value
        return WordClass.parse(str(value))

    @field_validator("translations", mode="before")
    @classmethod
    def _clean_translations(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            value = [value]
        cleaned = [str(item).strip() for item in (value or []) if str(item).strip()]
        return cleaned[:MAX_SENSE_TRANSLATIONS]


class AnalysisPayload(BaseModel):
    """Analysis schema"""
    state: int
    error_message: Optional[str] = Field(
        default="", validation_alias=AliasChoices("error_message", "errorMessage")
    )
    text_type: Optional[TextType] = Field(
        default=None, validation_alias=AliasChoices("text_type", "textType")
    )
    component_list: List[ComponentPayload] = Field(
        default_factory=list, validation_alias=AliasChoices("component_list", "componentList")
    )
    word_parts: List[WordPartPayload] = Field(
        default_factory=list, validation_alias=AliasChoices("word_parts", "wordParts")
    )

    @field_validator("text_type", mode="before")
    @classmethod
    def _normalize_text_type(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        return str(value).strip().lower()

    @field_validator("component_list", "word_parts", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ResponseParser:
    """Decodes raw model replies into typed results"""

    @staticmethod
    def extract_json(raw_text: Optional[str]) -> Dict[str, Any]:
        """
        Decode the span between the first '{' and the last '}' of a reply.

        Raises:
            InvalidResponseError: no brace pair, malformed JSON, or the
                decoded value is not an object
        """
        if not raw_text or not raw_text.strip():
            raise InvalidResponseError("Empty response")

        start = raw_text.find("{")
        end = raw_text.rfind("}")
        if start == -1 or end == -1 or end < start:
            raise InvalidResponseError(f"No JSON object in response: {raw_text[:200]}")

        try:
            data = json.loads(raw_text[start:end + 1])
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to decode model JSON: {e}")
            raise InvalidResponseError(f"Malformed JSON in response: {e}", cause=e)

        if not isinstance(data, dict):
            raise InvalidResponseError("Response JSON is not an object")
        return data

    @classmethod
    def parse_translation(cls, raw_text: Optional[str]) -> str:
        """
        Decode a reply against the translation schema.

        Returns:
            The translated text

        Raises:
            InvalidResponseError: undecodable payload or empty success result
            ServiceError: the model reported state 0
        """
        data = cls.extract_json(raw_text)
        try:
            payload = TranslationPayload.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(f"Response does not match translation schema: {e}", cause=e)

        if payload.state == STATE_SUCCESS:
            result = (payload.translate_result or "").strip()
            if not result:
                raise InvalidResponseError("Empty translation result")
            return result

        if payload.state == STATE_FAILURE:
            message = (payload.error_message or "").strip() or "Translation failed"
            raise ServiceError(message)

        raise InvalidResponseError(f"Unknown state: {payload.state}")

    @classmethod
    def parse_analysis(cls, raw_text: Optional[str]) -> AnalysisResult:
        """
        Decode a reply against the analysis schema.

        A success state whose text_type has no matching content (sentence
        without components, word without senses) is an analysis failure,
        not a partial result.
        """
        data = cls.extract_json(raw_text)
        try:
            payload = AnalysisPayload.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(f"Response does not match analysis schema: {e}", cause=e)

        if payload.state == STATE_FAILURE:
            message = (payload.error_message or "").strip() or "Analysis failed"
            raise ServiceError(message)
        if payload.state != STATE_SUCCESS:
            raise InvalidResponseError(f"Unknown state: {payload.state}")

        if payload.text_type is TextType.SENTENCE:
            if not payload.component_list:
                raise AnalyzeFailedError("Sentence analysis returned no components")
            return SentenceAnalysis(components=tuple(
                Component(
                    text=item.text,
                    translation=item.translation.strip(),
                    word_class=item.word_class,
                    start=item.start,
                    end=item.end,
                    kind=item.kind,
                    lemmatized_form=(item.lemmatized_form or "").strip() or None,
                )
                for item in payload.component_list
            ))

        if payload.text_type is TextType.WORD:
            senses = tuple(
                WordSense(word_class=part.word_class, translations=tuple(part.translations))
                for part in payload.word_parts
                if part.translations
            )
            if not senses:
                raise AnalyzeFailedError("Word analysis returned no senses")
            return WordSenseList(senses=senses)

        raise AnalyzeFailedError("Analysis did not report a text type")
