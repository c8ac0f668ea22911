"""Anthropic-backed repair attempt for the remote extraction strategy."""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import TYPE_CHECKING

import anthropic
import structlog
from anthropic import AsyncAnthropic
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from skill_matrix_agents.prompts.skill_matrix import (
    SKILL_MATRIX_REPAIR_USER,
    SKILL_MATRIX_SCHEMA,
    SKILL_MATRIX_SYSTEM,
    SKILL_MATRIX_USER,
)
from skill_matrix_core.constants import SKILL_MATRIX_PROMPT_VERSION
from skill_matrix_core.exceptions import StrategyFailedError, Violation

if TYPE_CHECKING:
    from skill_matrix_core.config.settings import Settings

logger = structlog.get_logger()

_TRANSIENT_ERRORS = (
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


def build_messages(
    document: str,
    prior_violations: Sequence[Violation] = (),
    prior_output: str | None = None,
) -> list[dict[str, str]]:
    """Build the user message for a first request or a repair request."""
    if prior_output is None:
        content = SKILL_MATRIX_USER.format(schema=SKILL_MATRIX_SCHEMA, document=document)
    else:
        content = SKILL_MATRIX_REPAIR_USER.format(
            schema=SKILL_MATRIX_SCHEMA,
            prior_output=prior_output,
            violations="\n".join(f"- {v}" for v in prior_violations) or "- unknown",
            document=document,
        )
    return [{"role": "user", "content": content}]


class AnthropicRepairAttempt:
    """Send one extraction or repair request to an Anthropic model."""

    def __init__(self, settings: Settings, client: AsyncAnthropic | None = None) -> None:
        """Initialize with settings and an optional pre-built client."""
        if client is None:
            if not settings.remote_enabled or settings.anthropic_api_key is None:
                msg = "Missing Anthropic API key."
                raise StrategyFailedError(msg)
            client = AsyncAnthropic(api_key=settings.anthropic_api_key.get_secret_value())
        self.settings = settings
        self._client = client

    async def attempt(
        self,
        document: str,
        prior_violations: Sequence[Violation] = (),
        prior_output: str | None = None,
    ) -> str:
        """Return the model's raw text answer.

        Transient transport errors are retried with exponential backoff;
        anything else, or exhausting the retries, raises StrategyFailedError.
        """
        messages = build_messages(document, prior_violations, prior_output)

        @retry(
            retry=retry_if_exception_type(_TRANSIENT_ERRORS),
            stop=stop_after_attempt(self.settings.transport_retry_max + 1),
            wait=wait_exponential(
                multiplier=1,
                min=self.settings.transport_retry_wait_min,
                max=self.settings.transport_retry_wait_max,
            ),
            reraise=True,
        )
        async def _do_call() -> anthropic.types.Message:
            return await self._client.messages.create(
                model=self.settings.remote_model,
                max_tokens=self.settings.remote_max_tokens,
                system=SKILL_MATRIX_SYSTEM,
                messages=messages,  # type: ignore[arg-type]
                temperature=0,
            )

        start = time.monotonic()
        try:
            response = await _do_call()
        except anthropic.APIStatusError as exc:
            msg = f"AI request failed: {exc.status_code}"
            raise StrategyFailedError(msg) from exc
        except anthropic.APIError as exc:
            msg = f"AI request failed: {exc}"
            raise StrategyFailedError(msg) from exc

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ).strip()

        logger.debug(
            "llm_call_complete",
            model=self.settings.remote_model,
            prompt_version=SKILL_MATRIX_PROMPT_VERSION,
            repair=prior_output is not None,
            duration=round(time.monotonic() - start, 2),
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )

        if not text:
            msg = "Empty AI response."
            raise StrategyFailedError(msg)
        return text
