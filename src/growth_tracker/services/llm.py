"""Structured-output model calls shared by the analysis services."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel

from growth_tracker.errors import AnalysisFailedError, MissingCredentialError

ResultT = TypeVar("ResultT", bound=BaseModel)

_logger = logging.getLogger(__name__)


class StructuredClient(Protocol):
    """Interface for LLM calls that return JSON matching a schema."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return the parsed JSON object produced by the model."""


@dataclass(frozen=True)
class ModelOptions:
    """Model selection passed through to every request."""

    model: str
    reasoning_effort: str | None = None
    store: bool = False


async def request_structured(  # noqa: PLR0913
    client: StructuredClient,
    options: ModelOptions,
    *,
    schema_name: str,
    schema: dict[str, object],
    prompt: str,
    result_type: type[ResultT],
) -> ResultT:
    """Call the model and validate its output.

    Any transport, decoding or validation problem becomes AnalysisFailedError.
    A missing credential is raised unchanged.
    """
    try:
        raw = await client.generate(
            model=options.model,
            reasoning_effort=options.reasoning_effort,
            store=options.store,
            schema_name=schema_name,
            schema=schema,
            prompt=prompt,
        )
        return result_type.model_validate(raw)
    except MissingCredentialError:
        raise
    except Exception as exc:
        _logger.exception("Structured request %s failed", schema_name)
        raise AnalysisFailedError() from exc
