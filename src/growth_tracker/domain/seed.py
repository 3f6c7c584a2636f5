"""Demo collections loaded when nothing has been stored yet."""

from typing import assert_never

from pydantic import TypeAdapter

from growth_tracker.domain.entries import (
    Domain,
    Entry,
    MindLog,
    MuscleLog,
    Transaction,
)

_MUSCLE_SEED = [
    {
        "id": "1",
        "date": "2025-11-17",
        "weight": 77.2,
        "workoutType": "Chest & Triceps",
        "workoutDuration": 90,
        "sleepHours": 7,
        "waterIntake": 3,
        "calories": 1935,
        "fiber": 37.5,
        "protein": 103,
        "carbs": 253,
        "fat": 71,
    },
    {
        "id": "2",
        "date": "2025-11-18",
        "weight": 77.2,
        "workoutType": "Back & Biceps",
        "workoutDuration": 60,
        "sleepHours": 6,
        "waterIntake": 2,
        "calories": 1153,
        "fiber": 25,
        "protein": 60.7,
        "carbs": 118.5,
        "fat": 46.3,
    },
    {
        "id": "3",
        "date": "2025-11-19",
        "weight": 77.2,
        "workoutType": "Off",
        "workoutDuration": 60,
        "sleepHours": 6,
        "waterIntake": 3,
        "calories": 1769,
        "fiber": 27.1,
        "protein": 54.9,
        "carbs": 248,
        "fat": 57.2,
    },
]

_MONEY_SEED = [
    {
        "id": "m1",
        "date": "2025-11-01",
        "type": "Income",
        "amount": 1000,
        "category": "Donation",
        "details": "UPI payment received",
        "subcategory": "Income",
    },
    {
        "id": "m2",
        "date": "2025-11-01",
        "type": "Expense",
        "amount": -10,
        "category": "Others",
        "details": "Sweet",
        "subcategory": "",
    },
    {
        "id": "m3",
        "date": "2025-11-01",
        "type": "Expense",
        "amount": -50,
        "category": "Grocery",
        "details": "Curd",
        "subcategory": "",
    },
]

_MIND_SEED = [
    {
        "id": "md1",
        "date": "2025-11-17",
        "mindScore": 8,
        "meditationMinutes": 20,
        "bookName": "Atomic Habits",
        "pagesRead": 15,
        "screenTimeMinutes": 145,
        "topApps": "Instagram, WhatsApp",
        "digitalDetox": False,
        "podcast": "Huberman Lab",
    },
    {
        "id": "md2",
        "date": "2025-11-18",
        "mindScore": 6,
        "meditationMinutes": 0,
        "bookName": "Atomic Habits",
        "pagesRead": 10,
        "screenTimeMinutes": 210,
        "topApps": "YouTube, X",
        "digitalDetox": False,
        "podcast": "",
    },
    {
        "id": "md3",
        "date": "2025-11-19",
        "mindScore": 9,
        "meditationMinutes": 30,
        "bookName": "Atomic Habits",
        "pagesRead": 25,
        "screenTimeMinutes": 60,
        "topApps": "WhatsApp",
        "digitalDetox": True,
        "podcast": "Naval Ravikant",
    },
]


def seed_entries(domain: Domain) -> list[Entry]:
    """Return a fresh copy of the demo collection for a domain."""
    if domain is Domain.MUSCLE:
        return list(TypeAdapter(list[MuscleLog]).validate_python(_MUSCLE_SEED))
    if domain is Domain.MIND:
        return list(TypeAdapter(list[MindLog]).validate_python(_MIND_SEED))
    if domain is Domain.MONEY:
        return list(TypeAdapter(list[Transaction]).validate_python(_MONEY_SEED))
    assert_never(domain)


def no_seed(domain: Domain) -> list[Entry]:
    """Start every domain empty."""
    return []
