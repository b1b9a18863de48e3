"""Voice command pipeline.

Sequences one request through the stages:

    classifier → normalize → segment → extract → dispatch → VoiceCommandResult

Requests share nothing but the read-only lexicons, classifier and
dispatcher, so any number may run concurrently. Command history is written
by a background task: a failed write is logged and never reaches the caller.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any

import structlog

from shopvoice.voice.history import CommandRecorder, HistoryStore
from shopvoice.voice.lexicon import DEFAULT_LEXICONS, LexiconSet
from shopvoice.voice.models import IntentClassification, VoiceCommandResult
from shopvoice.voice.parser.dispatcher import IntentDispatcher, create_default_dispatcher
from shopvoice.voice.parser.entity_extractor import extract_items
from shopvoice.voice.parser.intent_classifier import IntentClassifier, RuleIntentClassifier
from shopvoice.voice.responses import render

logger = logging.getLogger(__name__)


class VoicePipeline:
    """Interprets voice shopping commands."""

    def __init__(
        self,
        classifier: IntentClassifier,
        lexicons: LexiconSet = DEFAULT_LEXICONS,
        dispatcher: IntentDispatcher | None = None,
        history: CommandRecorder | None = None,
        default_language: str = "en",
    ):
        self.classifier = classifier
        self.lexicons = lexicons
        self.dispatcher = dispatcher or create_default_dispatcher()
        self.history = history
        self.default_language = default_language
        self._pending: set[asyncio.Task] = set()

    async def process_command(
        self,
        command: str,
        user_id: Any = None,
        language: str | None = None,
    ) -> VoiceCommandResult:
        """Interpret one command.

        Never raises: an internal failure comes back as ``success=False``
        with the error text and a generic apology.
        """
        language = language or self.default_language

        with structlog.contextvars.bound_contextvars(language=language, user_id=user_id):
            result = await self._interpret(command, language)
            if user_id is not None and self.history is not None:
                self._record_in_background(user_id, command, result)

        return result

    async def _interpret(self, command: str, language: str) -> VoiceCommandResult:
        try:
            classification = await self._classify(language, command)
            items = extract_items(command, self.lexicons.for_language(language))
            dispatch = self.dispatcher.dispatch(classification.label, items, language)

            confidence = 0.0
            if dispatch.recognized:
                confidence = max(0.0, min(1.0, classification.score))

            result = VoiceCommandResult(
                success=True,
                action=dispatch.action,
                items=items,
                item_info=dispatch.item_info,
                response=dispatch.response,
                confidence=confidence,
                language=language,
                intent=classification.label,
            )
        except Exception as e:
            logger.exception(f"Error processing voice command: {e}")
            result = VoiceCommandResult(
                success=False,
                response=render(language, "error"),
                language=language,
                error=str(e),
            )
        return result

    def process_command_sync(
        self,
        command: str,
        user_id: Any = None,
        language: str | None = None,
    ) -> VoiceCommandResult:
        """Run ``process_command`` to completion, history write included."""

        async def _run() -> VoiceCommandResult:
            result = await self.process_command(command, user_id, language)
            await self.drain()
            return result

        return asyncio.run(_run())

    async def drain(self) -> None:
        """Wait for in-flight history writes."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _classify(self, language: str, command: str) -> IntentClassification:
        outcome = self.classifier.classify(language, command)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return IntentClassification.coerce(outcome)

    def _record_in_background(self, user_id: Any, command: str, result: VoiceCommandResult) -> None:
        task = asyncio.create_task(self._record(user_id, command, result))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record(self, user_id: Any, command: str, result: VoiceCommandResult) -> None:
        try:
            await self.history.record_command(
                user_id,
                command,
                language=result.language,
                intent=result.intent,
                success=result.success,
            )
        except Exception as e:
            logger.warning(f"Failed to record voice command: {e}")


def build_pipeline(config=None) -> VoicePipeline:
    """Create a pipeline from args/voice.yaml (or an already loaded VoiceConfig)."""
    from shopvoice.voice.config import load_config

    if config is None:
        config = load_config()

    classifier = RuleIntentClassifier(
        min_score=config.classifier.min_score,
        base_confidence=config.classifier.base_confidence,
        fallback_language=config.classifier.fallback_language,
    )

    history = None
    if config.pipeline.record_history:
        history = HistoryStore(config.history.resolved_path())

    return VoicePipeline(
        classifier=classifier,
        history=history,
        default_language=config.pipeline.default_language,
    )


__all__ = ["VoicePipeline", "build_pipeline"]
