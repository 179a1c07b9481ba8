from __future__ import annotations

from app.domain.entities.intent import Intent, IntentKind


RANDOM_ALL_TRIGGER = "สุ่มหนัง"
RANDOM_ROMANCE_TRIGGER = "สุ่มหนังรัก"
RANDOM_COMEDY_TRIGGER = "สุ่มหนังตลก"
RANDOM_HORROR_TRIGGER = "สุ่มหนังผี"
SYNOPSIS_TRIGGER = "ขอเรื่องย่อหน่อย"

GENRE_TRIGGERS = (
    RANDOM_ALL_TRIGGER,
    RANDOM_ROMANCE_TRIGGER,
    RANDOM_COMEDY_TRIGGER,
    RANDOM_HORROR_TRIGGER,
)

_KIND_BY_TRIGGER = {
    RANDOM_ALL_TRIGGER: IntentKind.RANDOM_ALL,
    RANDOM_ROMANCE_TRIGGER: IntentKind.RANDOM_ROMANCE,
    RANDOM_COMEDY_TRIGGER: IntentKind.RANDOM_COMEDY,
    RANDOM_HORROR_TRIGGER: IntentKind.RANDOM_HORROR,
    SYNOPSIS_TRIGGER: IntentKind.SYNOPSIS,
}


class ClassifyIntentUseCase:
    """Exact-match command table; anything unknown is echoed back."""

    def execute(self, text: str) -> Intent:
        kind = _KIND_BY_TRIGGER.get(text)
        if kind is None:
            return Intent(kind=IntentKind.ECHO, text=text)
        return Intent(kind=kind, text=text)
