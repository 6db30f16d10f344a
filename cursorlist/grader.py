"""Scored checks of the CursorList behaviour."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO

from cursorlist.cursor_list import CursorList, Node

Log = Callable[[str], None]


class CheckFailed(Exception):
    """A check stopped early; ``score`` is the partial score earned."""

    def __init__(self, message: str, score: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.score = score


@dataclass(frozen=True)
class Check:
    """One numbered check with its title and maximum score."""

    id: int
    title: str
    max_score: int
    run: Callable[[Log, random.Random], int]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of running one check."""

    check: Check
    score: int

    @property
    def passed(self) -> bool:
        return self.score == self.check.max_score


def _info(log: Log, message: str) -> None:
    log(f"   [ INFO ] {message}")


def _ok(log: Log, message: str) -> None:
    log(f"   [OK] {message}")


def sample_list() -> CursorList:
    """Return a list of 0, 2, ..., 18 linked by hand, cursor on the head."""
    lst = CursorList()
    lst.head = lst.tail = Node(0)
    lst.cursor = lst.head
    for value in range(2, 20, 2):
        node = Node(value, prev=lst.tail)
        lst.tail.next = node
        lst.tail = node
    return lst


def empty_list() -> CursorList:
    """Return a list with no nodes and no cursor."""
    return CursorList()


def _logged_sample(log: Log) -> CursorList:
    _info(log, "Creando Lista:{0,2,4,6,8,10,12,14,16,18}")
    _info(log, "llamando a firstList")
    return sample_list()


def _logged_empty(log: Log) -> CursorList:
    _info(log, "Creando Lista vacia (head=NULL)")
    return empty_list()


def check_create(log: Log) -> int:
    lst = CursorList()
    if lst.head is not None or lst.tail is not None or lst.cursor is not None:
        raise CheckFailed("Debes inicalizar los componentes de la lista")
    _ok(log, "createList")
    return 10


def check_first_next(log: Log) -> int:
    lst = _logged_sample(log)
    _info(log, "llamando a firstList")
    value = lst.first()
    if value is None:
        raise CheckFailed("firstList retorna NULL")
    if value != 0:
        raise CheckFailed(f"firstList retorna {value}")
    if lst.cursor is None:
        raise CheckFailed("firstList debe actualizar posicion del current")
    if lst.cursor is not lst.head:
        raise CheckFailed("current debería apuntar al primer nodo")

    lst = _logged_empty(log)
    _info(log, "llamando a firstList")
    if lst.first() is not None:
        raise CheckFailed("firstList deberia retornar NULL")
    _ok(log, "firstList")

    lst = _logged_sample(log)
    _info(log, "llamando a nextList")
    value = lst.next()
    if value is None:
        raise CheckFailed("nextList retorna NULL", 5)
    if value != 2:
        raise CheckFailed(f"nextList retorna {value}", 5)
    if lst.cursor is not lst.head.next:
        raise CheckFailed("current deberia moverse al siguiente nodo", 5)
    _ok(log, "nextList")

    _info(log, "posicionando el current al final de la lista")
    lst.cursor = lst.tail
    _info(log, "llamando a nextList")
    if lst.next() is not None:
        raise CheckFailed("nextList deberia retornar NULL", 5)
    _ok(log, "nextList")

    _info(log, "modificando: current=NULL")
    lst.cursor = None
    _info(log, "llamando a nextList")
    if lst.next() is not None:
        raise CheckFailed("nextList deberia retornar NULL", 5)
    _ok(log, "nextList")
    return 15


def check_last_prev(log: Log) -> int:
    lst = _logged_sample(log)
    _info(log, "llamando a lastList")
    value = lst.last()
    if value is None:
        raise CheckFailed("lastList retorna NULL")
    if value != 18:
        raise CheckFailed(f"lastList retorna {value}")
    if lst.cursor is None:
        raise CheckFailed("lastList debe actualizar posicion del current")
    if lst.cursor is not lst.tail:
        raise CheckFailed("current deberia apuntar al ultimo nodo")
    _ok(log, "lastList")

    _info(log, "llamando a prevList")
    value = lst.prev()
    if value is None:
        raise CheckFailed("prevList retorna NULL")
    if value != 16:
        raise CheckFailed(f"prevList retorna {value}")
    if lst.cursor is not lst.tail.prev:
        raise CheckFailed("current deberia moverse al nodo anterior")
    _ok(log, "prevList")

    _info(log, "posicionando el current al comienzo de la lista")
    lst.cursor = lst.head
    _info(log, "llamando a prevList")
    if lst.prev() is not None:
        raise CheckFailed("prevList deberia retornar NULL")
    _ok(log, "prevList")

    _info(log, "modificando: current=NULL")
    lst.cursor = None
    _info(log, "llamando a prevList")
    if lst.prev() is not None:
        raise CheckFailed("prevList deberia retornar NULL")
    _ok(log, "prevList")
    return 10


def check_push_front(log: Log, rng: random.Random) -> int:
    _info(log, "Creando lista vacia")
    lst = CursorList()
    value = rng.randrange(100)
    _info(log, f"Insertando {value} a la lista (pushfront)")
    lst.push_front(value)
    if lst.head is None:
        raise CheckFailed("head=NULL")
    if lst.tail is None:
        raise CheckFailed("tail=NULL")
    if lst.head is not lst.tail:
        raise CheckFailed("head!=tail")
    if lst.head.data is not value:
        raise CheckFailed(f"head->data!={value}")

    lst = _logged_sample(log)
    old_head = lst.head
    _info(log, f"pushFront({value})")
    lst.push_front(value)
    if lst.head.data is not value:
        raise CheckFailed(f"head->data!={value}")
    if lst.head.next is None:
        raise CheckFailed("head->next=NULL")
    if lst.head.next is not old_head:
        raise CheckFailed(f"head->next->data={lst.head.next.data} (debe ser 0)")
    _ok(log, "pushFront")
    return 10


def check_push_current(log: Log, rng: random.Random) -> int:
    lst = _logged_sample(log)
    value = rng.randrange(100)
    lst.cursor = lst.head
    _info(log, "Moviendo el current al primer nodo de la lista")
    _info(log, f"pushCurrent({value})")
    lst.push_current(value)
    if lst.head is None or lst.head.next is None:
        raise CheckFailed("head o head->next es NULL")
    if lst.head.next.data is not value:
        raise CheckFailed(f"head->next->data!={value}")
    if lst.head.next.prev is None:
        raise CheckFailed("el prev del nuevo nodo deberia apuntar a head")

    lst.cursor = lst.tail
    old_tail = lst.tail
    _info(log, "aux=L->tail")
    _info(log, "Moviendo el current al ultimo nodo de la lista")
    lst.push_current(value)
    if lst.tail is None or lst.tail.data is not value:
        raise CheckFailed("tail deberia apuntar al nuevo nodo")
    if old_tail.next is None or old_tail.next is not lst.tail:
        raise CheckFailed("aux->next deberia apuntar a nuevo tail")
    if lst.tail.prev is None or lst.tail.prev is not old_tail:
        raise CheckFailed("tail->prev deberia apuntar a aux")
    _ok(log, "pushCurrent")
    return 10


def check_pop_current(log: Log) -> int:
    lst = _logged_sample(log)
    lst.cursor = lst.head
    _info(log, "Moviendo el current al primer nodo de la lista")
    _info(log, "popCurrent()")
    value = lst.pop_current()
    if lst.head is None or lst.head.data != 2:
        raise CheckFailed("El head es incorrecto")
    if lst.head.prev is not None:
        raise CheckFailed("head->prev deberia ser NULL")
    if value != 0:
        raise CheckFailed(f"PopCurrent retorna {value}")

    lst.cursor = lst.head.next
    after = lst.head.next.next
    _info(log, "L->current=L->head->next")
    _info(log, "aux=L->head->next->next")
    _info(log, "popCurrent()")
    value = lst.pop_current()
    if lst.head.next is None or lst.head.next is not after:
        raise CheckFailed("L->head->next deberia apuntar a aux")
    if after.prev is not lst.head:
        raise CheckFailed("aux->prev deberia apuntar a head")
    if value != 4:
        raise CheckFailed(f"PopCurrent retorna {value}")

    lst.cursor = lst.tail
    before = lst.tail.prev
    _info(log, "L->current=L->tail")
    _info(log, "aux=L->tail->prev")
    _info(log, "popCurrent()")
    value = lst.pop_current()
    if lst.tail is not before:
        raise CheckFailed("tail deberia ser igual a aux")
    if lst.tail.next is not None:
        raise CheckFailed(">tail->next deberia apuntar a NULL")
    if value != 18:
        raise CheckFailed(f"PopCurrent retorna {value}")
    _ok(log, "popCurrent")
    return 15


CHECKS = (
    Check(0, "Test Create...", 10, lambda log, rng: check_create(log)),
    Check(1, "Test First y Next...", 15, lambda log, rng: check_first_next(log)),
    Check(2, "Test Last y Prev...", 10, lambda log, rng: check_last_prev(log)),
    Check(3, "Test pushFront...", 10, check_push_front),
    Check(4, "Test pushCurrent...", 10, check_push_current),
    Check(5, "Test popCurrent...", 15, lambda log, rng: check_pop_current(log)),
)


def run_checks(
    test_id: Optional[int] = None,
    out: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
) -> List[CheckResult]:
    """Run all checks, or only the one numbered ``test_id``.

    A single requested check that earns full marks prints ``SUCCESS``.
    Without ``test_id`` the total score is printed at the end.
    """
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng

    def log(line: str) -> None:
        print(line, file=out)

    results: List[CheckResult] = []
    for check in CHECKS:
        if test_id is not None and test_id != check.id:
            continue
        print(f"\n{check.title}", file=out)
        try:
            score = check.run(log, rng)
        except CheckFailed as failure:
            log(f"   [FAILED] {failure.message}")
            score = failure.score
        result = CheckResult(check, score)
        results.append(result)
        if test_id == check.id and result.passed:
            print("SUCCESS", file=out)
            return results
        print(f"   partial_score: {score}/{check.max_score}", file=out)

    if test_id is None:
        total = sum(result.score for result in results)
        maximum = sum(check.max_score for check in CHECKS)
        print(f"\ntotal_score: {total}/{maximum}", file=out)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: optionally run a single numbered check."""
    parser = argparse.ArgumentParser(description="Score the CursorList behaviour.")
    parser.add_argument("test_id", nargs="?", type=int, default=None)
    args = parser.parse_args(argv)
    run_checks(args.test_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())