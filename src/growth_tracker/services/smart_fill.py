"""Free-text day summaries parsed into muscle log fields."""

from dataclasses import dataclass
from datetime import date

from growth_tracker.domain.analysis import ParsedDayLog
from growth_tracker.domain.entries import MuscleLogInput
from growth_tracker.services.llm import (
    ModelOptions,
    StructuredClient,
    request_structured,
)


def _nullable(kind: str) -> dict[str, object]:
    return {"anyOf": [{"type": kind}, {"type": "null"}]}


_FIELDS: dict[str, str] = {
    "date": "string",
    "weight": "number",
    "workoutType": "string",
    "workoutDuration": "number",
    "sleepHours": "number",
    "waterIntake": "number",
    "calories": "number",
    "fiber": "number",
    "protein": "number",
    "carbs": "number",
    "fat": "number",
}

SMART_FILL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {name: _nullable(kind) for name, kind in _FIELDS.items()},
    "required": list(_FIELDS),
    "additionalProperties": False,
}


@dataclass
class SmartFillService:
    """Extracts muscle log fields from a natural-language description."""

    client: StructuredClient
    options: ModelOptions

    async def parse(self, text: str, today: date) -> ParsedDayLog:
        """Return the fields mentioned in text; the date defaults to today."""
        parsed = await request_structured(
            self.client,
            self.options,
            schema_name="muscle_log_fill",
            schema=SMART_FILL_SCHEMA,
            prompt=_smart_fill_prompt(text, today),
            result_type=ParsedDayLog,
        )
        if parsed.date is None:
            parsed = parsed.model_copy(update={"date": today})
        return parsed


def merge_into(data: MuscleLogInput, parsed: ParsedDayLog) -> MuscleLogInput:
    """Overlay parsed fields on an in-progress log, leaving unmentioned ones."""
    payload = data.model_dump()
    payload.update(parsed.model_dump(exclude_none=True))
    return MuscleLogInput.model_validate(payload)


def _smart_fill_prompt(text: str, today: date) -> str:
    return (
        "Extract fitness data from this text into a JSON object. "
        f"Current date is {today.isoformat()}. If no date is mentioned, use "
        "the current date. Use null for anything not mentioned. Fields: date "
        "(YYYY-MM-DD), weight (kg), workoutType, workoutDuration (minutes), "
        "sleepHours, waterIntake (liters), calories, fiber, protein, carbs, "
        "fat (grams).\n\n"
        f'Input: "{text}"'
    )
