"""Domain models for logged entries across the three tracking domains."""

import datetime as dt
from enum import StrEnum
from typing import Annotated, ClassVar, assert_never

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from growth_tracker.domain.coercion import to_float, to_int, to_text

Number = Annotated[float, BeforeValidator(to_float)]
Count = Annotated[int, BeforeValidator(to_int)]
Text = Annotated[str, BeforeValidator(to_text)]


class Domain(StrEnum):
    """Tracking domains."""

    MUSCLE = "MUSCLE"
    MIND = "MIND"
    MONEY = "MONEY"


class TransactionType(StrEnum):
    """Money transaction kinds. NO_EXPENSE is reserved and never produced."""

    INCOME = "Income"
    EXPENSE = "Expense"
    NO_EXPENSE = "No Expense"


OTHER_WORKOUT = "Other / Custom"

WORKOUT_OPTIONS: tuple[str, ...] = (
    "Rest / Active Recovery",
    "Chest & Triceps",
    "Back & Biceps",
    "Legs (Quads Focus)",
    "Legs (Hamstrings/Glutes)",
    "Legs (General)",
    "Shoulders & Abs",
    "Push Day",
    "Pull Day",
    "Full Body",
    "Upper Body",
    "Lower Body",
    "Cardio",
    "HIIT",
    "Crossfit",
    "Yoga / Pilates",
    OTHER_WORKOUT,
)

MONEY_CATEGORIES: tuple[str, ...] = (
    "Food & Dining",
    "Transportation",
    "Housing & Utilities",
    "Shopping",
    "Health & Wellness",
    "Investments & Debt",
    "Social & Leisure",
    "Income",
    "Others",
)

DEFAULT_CATEGORY = MONEY_CATEGORIES[-1]


class _Record(BaseModel):
    """Shared configuration: camelCase on the wire, immutable in memory."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    domain: ClassVar[Domain]


class MuscleLogInput(_Record):
    """A training and nutrition day, without an identifier."""

    domain: ClassVar[Domain] = Domain.MUSCLE

    date: dt.date
    weight: Number = 0.0
    workout_type: Text = WORKOUT_OPTIONS[0]
    workout_duration: Count = 0
    sleep_hours: Number = 0.0
    water_intake: Count = 3
    calories: Number = 0.0
    fiber: Number = 0.0
    protein: Number = 0.0
    carbs: Number = 0.0
    fat: Number = 0.0

    @classmethod
    def blank(cls, today: dt.date) -> "MuscleLogInput":
        """Return the default form values for a new day."""
        return cls(date=today)

    @property
    def workout_option(self) -> str:
        """Return the fixed option matching the workout type, or the custom one."""
        if self.workout_type in WORKOUT_OPTIONS:
            return self.workout_type
        return OTHER_WORKOUT


class MuscleLog(MuscleLogInput):
    id: str


class TransactionInput(_Record):
    """A money movement, without an identifier."""

    domain: ClassVar[Domain] = Domain.MONEY

    date: dt.date
    type: TransactionType = TransactionType.EXPENSE
    amount: Number = 0.0
    category: Text = DEFAULT_CATEGORY
    details: Text = ""
    subcategory: str | None = None

    @classmethod
    def blank(cls, today: dt.date) -> "TransactionInput":
        """Return the default form values for a new transaction."""
        return cls(date=today, subcategory="")


class Transaction(TransactionInput):
    id: str


class MindLogInput(_Record):
    """A mental wellness day, without an identifier."""

    domain: ClassVar[Domain] = Domain.MIND

    date: dt.date
    mind_score: Count = 5
    meditation_minutes: Count = 0
    book_name: Text = ""
    pages_read: Count = 0
    screen_time_minutes: Count = 0
    top_apps: Text = ""
    digital_detox: bool = False
    podcast: Text = ""

    @classmethod
    def blank(cls, today: dt.date) -> "MindLogInput":
        """Return the default form values for a new day."""
        return cls(date=today)


class MindLog(MindLogInput):
    id: str


Entry = MuscleLog | MindLog | Transaction
EntryInput = MuscleLogInput | MindLogInput | TransactionInput


def entry_model(domain: Domain) -> type[Entry]:
    """Return the stored entry model for a domain."""
    if domain is Domain.MUSCLE:
        return MuscleLog
    if domain is Domain.MIND:
        return MindLog
    if domain is Domain.MONEY:
        return Transaction
    assert_never(domain)


def with_id(data: EntryInput, entry_id: str) -> Entry:
    """Attach an identifier to input data, producing a stored entry."""
    model = entry_model(data.domain)
    payload = data.model_dump()
    payload["id"] = entry_id
    return model.model_validate(payload)


def without_id(entry: Entry) -> EntryInput:
    """Strip the identifier from a stored entry, e.g. to prefill an edit form."""
    payload = entry.model_dump(exclude={"id"})
    if isinstance(entry, MuscleLog):
        return MuscleLogInput.model_validate(payload)
    if isinstance(entry, MindLog):
        return MindLogInput.model_validate(payload)
    return TransactionInput.model_validate(payload)


def signed_amount(transaction_type: TransactionType, amount: float) -> float:
    """Return the stored amount: negative for expenses, positive otherwise."""
    magnitude = abs(amount)
    if transaction_type is TransactionType.EXPENSE:
        return -magnitude
    return magnitude
