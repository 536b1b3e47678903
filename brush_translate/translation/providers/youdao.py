"""
Youdao text translation adapter (signed REST API)

Requests are form-encoded and signed with
sha256(appKey + input + salt + curtime + appSecret), where input is the
text itself when it has at most 20 characters, otherwise its first 10
characters + its length + its last 10 characters.
"""
import hashlib
import time
import uuid
from typing import Callable, Dict, Optional

import httpx
from loguru import logger

from ...config import Settings
from ..errors import InvalidResponseError, ServiceError
from ..languages import LanguageOption, Provider, display_name_for_code
from ..models import Credentials, ProviderTranslation
from .base import ProviderAdapter


SIGN_TYPE = "v3"

YOUDAO_LANGUAGE_CODES = {
    LanguageOption.SIMPLIFIED_CHINESE: "zh-CHS",
    LanguageOption.TRADITIONAL_CHINESE: "zh-CHT",
    LanguageOption.AUTO: "auto",
}

YOUDAO_ERROR_MESSAGES: Dict[str, str] = {
    "101": "Missing required parameter",
    "102": "Unsupported language",
    "103": "Text too long",
    "104": "Unsupported API type",
    "105": "Unsupported signature type",
    "106": "Unsupported response type",
    "107": "Unsupported transport encryption type",
    "108": "Invalid app key",
    "109": "Malformed batchLog",
    "110": "No valid application for this service",
    "111": "Invalid developer account",
    "112": "Invalid service request",
    "113": "q must not be empty",
    "114": "Unsupported image transfer method",
    "116": "Invalid strict value",
    "201": "Decryption failed",
    "202": "Signature check failed",
    "203": "Client IP not in the allowed list",
    "205": "Request does not match the app platform type",
    "206": "Invalid timestamp, signature check failed",
    "207": "Replayed request",
    "301": "Dictionary lookup failed",
    "302": "Translation lookup failed",
    "303": "Other server error",
    "304": "Translation failed",
    "308": "Invalid rejectFallback parameter",
    "309": "Invalid domain parameter",
}


def language_code(option: LanguageOption) -> str:
    return YOUDAO_LANGUAGE_CODES.get(option, option.code)


def display_name(code: str) -> str:
    """Label for a Youdao language code"""
    return display_name_for_code(code)


def sign_input(text: str) -> str:
    if len(text) <= 20:
        return text
    return f"{text[:10]}{len(text)}{text[-10:]}"


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def build_sign(app_key: str, text: str, salt: str, curtime: str, app_secret: str) -> str:
    return sha256_hex(f"{app_key}{sign_input(text)}{salt}{curtime}{app_secret}")


def error_message(code: str) -> Optional[str]:
    return YOUDAO_ERROR_MESSAGES.get(code)


class YoudaoAdapter(ProviderAdapter):
    """Classic MT REST API with HMAC-style signing and numeric error codes"""

    provider = Provider.YOUDAO

    def __init__(
        self,
        config: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.time,
        salt_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        super().__init__(config, client)
        self.endpoint = self.config.YOUDAO_API_URL
        self._clock = clock
        self._salt_factory = salt_factory

    def build_form(self, text: str, source: LanguageOption, target: LanguageOption, credentials: Credentials) -> Dict[str, str]:
        app_key = credentials.api_key.strip()
        app_secret = (credentials.secret or "").strip()
        salt = self._salt_factory()
        curtime = str(int(self._clock()))
        return {
            "q": text,
            "from": language_code(source),
            "to": language_code(target),
            "appKey": app_key,
            "salt": salt,
            "sign": build_sign(app_key, text, salt, curtime, app_secret),
            "signType": SIGN_TYPE,
            "curtime": curtime,
        }

    async def translate(
        self,
        text: str,
        source: LanguageOption,
        target: LanguageOption,
        model: str,
        credentials: Credentials,
    ) -> ProviderTranslation:
        logger.debug(f"Youdao translation: {language_code(source)} -> {language_code(target)}, chars={len(text)}")
        response = await self._send(
            "POST",
            self.endpoint,
            data=self.build_form(text, source, target, credentials),
        )
        data = self._decode_body(response)
        return self.parse_response(data)

    def parse_response(self, data: dict) -> ProviderTranslation:
        if not isinstance(data, dict):
            raise InvalidResponseError("Youdao response is not an object")

        code = str(data.get("errorCode", "")).strip()
        if code != "0":
            if not code:
                raise InvalidResponseError("Youdao response has no errorCode")
            message = error_message(code) or f"Youdao error {code}"
            logger.error(f"Youdao returned error {code}: {message}")
            raise ServiceError(message)

        translations = [t.strip() for t in data.get("translation") or [] if isinstance(t, str) and t.strip()]
        if not translations:
            raise InvalidResponseError("Youdao returned no translation")

        # "l" looks like "en2zh-CHS"
        detected = None
        direction = data.get("l")
        if isinstance(direction, str) and "2" in direction:
            detected = direction.split("2", 1)[0] or None

        return ProviderTranslation(translated_text="\n".join(translations), detected_source=detected)
