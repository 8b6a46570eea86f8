"""Fixed starter catalog inserted when the lesson collection is empty."""
from __future__ import annotations

from lessons_api.schemas import Lesson

SAMPLE_LESSONS = (
    Lesson(
        subject="Cooking Class",
        price=25,
        location="Kitchen Lab",
        spaces=10,
        description="Learn to cook delicious meals.",
        image="/images/cooking-class.jpeg",
    ),
    Lesson(
        subject="Debate Competition",
        price=15,
        location="Auditorium",
        spaces=20,
        description="Sharpen your public speaking skills.",
        image="/images/debate-comp.jpeg",
    ),
)


def sample_lessons() -> list[dict]:
    """Return fresh dicts so callers can attach ids without sharing state."""
    return [lesson.model_dump() for lesson in SAMPLE_LESSONS]
