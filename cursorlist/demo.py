"""Small demonstration: a list of movies printed in order."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from cursorlist.cursor_list import CursorList


@dataclass
class Movie:
    """A film with its release year and director."""

    year: int
    title: str
    director: str


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a short movie list and print each title with its year."""
    movies = CursorList()
    movies.push_back(Movie(2004, "2046", "Wong Kar Wai"))
    movies.push_back(Movie(2016, "Arrival", "Denis Villeneuve "))

    movie = movies.first()
    while movie is not None:
        print(f"{movie.title} ({movie.year})")
        movie = movies.next()
    return 0


if __name__ == "__main__":
    sys.exit(main())