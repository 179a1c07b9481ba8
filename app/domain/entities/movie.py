from dataclasses import dataclass
from enum import Enum


class Genre(str, Enum):
    ALL = "all"
    ROMANCE = "romance"
    COMEDY = "comedy"
    HORROR = "horror"


@dataclass(frozen=True)
class Movie:
    title: str
    poster_path: str
    overview: str
