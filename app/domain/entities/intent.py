from dataclasses import dataclass
from enum import Enum

from app.domain.entities.movie import Genre


class IntentKind(str, Enum):
    GREET = "greet"
    RANDOM_ALL = "random_all"
    RANDOM_ROMANCE = "random_romance"
    RANDOM_COMEDY = "random_comedy"
    RANDOM_HORROR = "random_horror"
    SYNOPSIS = "synopsis"
    ECHO = "echo"


_GENRE_BY_KIND = {
    IntentKind.RANDOM_ALL: Genre.ALL,
    IntentKind.RANDOM_ROMANCE: Genre.ROMANCE,
    IntentKind.RANDOM_COMEDY: Genre.COMEDY,
    IntentKind.RANDOM_HORROR: Genre.HORROR,
}


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    text: str = ""

    @property
    def genre(self) -> Genre | None:
        return _GENRE_BY_KIND.get(self.kind)
