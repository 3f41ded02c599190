# services.py

from typing import Any, List, Optional

from loguru import logger
from pydantic import ValidationError

from config import Settings
from extraction import extract_json
from llm_clients import JSON_OBJECT, CompletionClient, Message
from models import AudioFeatureRecord, EvaluationRequest, EvaluationResult
from prompts import AUDIO_ANALYSIS_TEMPLATE, EVALUATION_SYSTEM_PROMPT

PREVIEW_CHARS = 100


class EvaluationError(Exception):
    pass


class EmptyCompletionError(EvaluationError):
    pass


class ResponseParseError(EvaluationError):
    def __init__(self, reason: str, raw: str):
        super().__init__(
            f"Failed to parse JSON from AI response ({reason}). Raw content: {raw[:PREVIEW_CHARS]}"
        )
        self.reason = reason
        self.raw = raw


class SchemaMismatchError(EvaluationError):
    pass


def build_audio_prompt(features: AudioFeatureRecord) -> str:
    # Volume figures are formatted with two decimals; a missing or non-numeric one raises.
    return AUDIO_ANALYSIS_TEMPLATE.format(
        pitch_variance=features.pitch_variance,
        volume_max=features.volume_max,
        volume_min=features.volume_min,
        volume_avg=features.volume_avg,
        pause_count=features.pause_count,
        pause_avg_duration=features.pause_avg_duration,
    )


def build_system_prompt(features: Optional[AudioFeatureRecord] = None) -> str:
    audio_prompt = build_audio_prompt(features) if features is not None else ""
    return EVALUATION_SYSTEM_PROMPT + audio_prompt


def build_messages(request: EvaluationRequest) -> List[Message]:
    return [
        {"role": "system", "content": build_system_prompt(request.audio_features)},
        {"role": "user", "content": request.transcript},
    ]


class EvaluationService:
    """Runs one transcript through the completion service and extracts the evaluation JSON."""

    def __init__(self, client: CompletionClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    async def evaluate(self, request: EvaluationRequest) -> Any:
        messages = build_messages(request)

        logger.info("Sending prompt to {} ({})", self.settings.llm_provider, self.settings.llm_model)
        logger.info("Transcript preview: {}...", request.transcript[:PREVIEW_CHARS])

        completions = await self.client.create(
            messages=messages,
            model=self.settings.llm_model,
            response_format=JSON_OBJECT,
        )

        content = completions[0].content if completions else None
        if self.settings.log_payloads:
            logger.info("Raw response from completion service: {!r}", content)
        else:
            logger.debug("Raw response length: {}", len(content or ""))

        if not content:
            raise EmptyCompletionError("No content received from completion service")

        extracted = extract_json(content)
        if not extracted.ok:
            raise ResponseParseError(extracted.error, content)

        logger.info("Parsed evaluation JSON successfully")

        if self.settings.strict_schema:
            self.validate(extracted.value)

        return extracted.value

    @staticmethod
    def validate(value: Any) -> None:
        try:
            EvaluationResult.model_validate(value)
        except ValidationError as e:
            raise SchemaMismatchError(f"Evaluation does not match schema: {e}") from e
