"""
Chirp validation: decode, length check, profanity filter.

Decoding failures raise MalformedChirpError (500) and over-long chirps raise
ChirpTooLongError (400); the API layer renders both as {"error": message}.

Decoding is lenient in the same places a streaming JSON decoder is: invalid
UTF-8 becomes U+FFFD, only the first JSON value is read, null leaves the
chirp empty, and the "body" key is matched case-insensitively.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from chirpy.chirpy_logging import get_logger
from chirpy.config.settings import MAX_CHIRP_LENGTH
from chirpy.core.exceptions import ChirpTooLongError, MalformedChirpError
from chirpy.moderation.profanity import ProfanityFilter

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


class ChirpParams(BaseModel):
    """POST /api/validate_chirp body. Missing or null body is the empty chirp; extra keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    body: StrictStr = Field("", description="Chirp text")

    @model_validator(mode="before")
    @classmethod
    def _normalize_document(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        # Keys match case-insensitively, later keys overwrite earlier ones, null leaves the value alone
        body: Any = ""
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "body" and value is not None:
                body = value
        return {"body": body}


def decode_first_json_value(raw: bytes | str) -> Any:
    """Return the first JSON value in raw, ignoring anything after it.

    Raises:
        json.JSONDecodeError: If raw does not start with a JSON value.
    """
    text = raw.decode("utf-8", "replace") if isinstance(raw, bytes) else raw
    value, _ = _decoder.raw_decode(text.lstrip(" \t\r\n"))
    return value


class CleanedChirp(BaseModel):
    """POST /api/validate_chirp response."""

    cleaned_body: str = Field(..., description="Chirp text with banned words masked")


class ChirpValidator:
    """Validates and cleans chirps against a length limit and a ProfanityFilter."""

    def __init__(
        self,
        profanity_filter: ProfanityFilter | None = None,
        max_length: int = MAX_CHIRP_LENGTH,
    ) -> None:
        self.profanity_filter = profanity_filter or ProfanityFilter()
        self.max_length = max_length

    def parse(self, raw: bytes | str) -> ChirpParams:
        """Decode a JSON request body into ChirpParams, or raise MalformedChirpError."""
        try:
            return ChirpParams.model_validate(decode_first_json_value(raw))
        except ValueError as e:
            # ValidationError and JSONDecodeError are both ValueErrors
            logger.info("chirp_decode_failed", error_type=type(e).__name__)
            raise MalformedChirpError() from e

    def clean(self, params: ChirpParams) -> CleanedChirp:
        """Length-check the raw body, then mask banned words."""
        if len(params.body) > self.max_length:
            logger.info("chirp_rejected", reason="too_long", length=len(params.body), max_length=self.max_length)
            raise ChirpTooLongError()
        return CleanedChirp(cleaned_body=self.profanity_filter.filter(params.body))

    def validate(self, raw: bytes | str) -> CleanedChirp:
        return self.clean(self.parse(raw))
