from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, TypeVar

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ValidationError

from jobsai.ai.client import get_generation_client
from jobsai.ai.errors import FlowInputError, FlowOutputError


logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


class GenerationClient(Protocol):
    def generate_json(self, prompt: str) -> Any | None: ...


def _schema_instructions(output_model: type[BaseModel]) -> str:
    schema = output_model.model_json_schema(by_alias=True)
    return (
        "Respond with a single JSON object only, no prose and no code fences. "
        f"It must match this JSON schema: {json.dumps(schema, ensure_ascii=False)}"
    )


@dataclass(frozen=True)
class PromptFlow(Generic[InputT, OutputT]):
    """Validate input, render a fixed template, make one model call, validate the reply."""

    name: str
    input_model: type[InputT]
    output_model: type[OutputT]
    render: Callable[[InputT], str]
    input_error: str
    output_error: str
    # When set, an empty reply yields the output model's defaults instead of an error.
    default_on_empty: bool = False

    def build_prompt(self, data: InputT) -> str:
        return f"{self.render(data).rstrip()}\n\n{_schema_instructions(self.output_model)}\n"

    def validate_input(self, payload: InputT | dict[str, Any]) -> InputT:
        if isinstance(payload, self.input_model):
            return payload
        try:
            return self.input_model.model_validate(payload)
        except ValidationError as exc:
            raise FlowInputError(self.input_error) from exc

    def validate_output(self, raw: Any) -> OutputT:
        if not raw:
            if self.default_on_empty:
                logger.warning("flow.empty_output name=%s", self.name)
                return self.output_model()
            raise FlowOutputError(self.output_error)
        try:
            return self.output_model.model_validate(raw)
        except ValidationError as exc:
            logger.warning("flow.invalid_output name=%s errors=%d", self.name, exc.error_count())
            raise FlowOutputError(self.output_error) from exc

    async def __call__(self, payload: InputT | dict[str, Any], client: GenerationClient | None = None) -> OutputT:
        data = self.validate_input(payload)
        prompt = self.build_prompt(data)
        client = client or get_generation_client()
        logger.info("flow.start name=%s", self.name)
        raw = await run_in_threadpool(client.generate_json, prompt)
        return self.validate_output(raw)
