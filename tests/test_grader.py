import io
import random

import pytest

from cursorlist.grader import (
    CHECKS,
    CheckFailed,
    CheckResult,
    check_create,
    check_first_next,
    check_last_prev,
    check_pop_current,
    check_push_current,
    check_push_front,
    empty_list,
    main,
    run_checks,
    sample_list,
)


def test_sample_list_contents():
    lst = sample_list()
    assert list(lst) == [0, 2, 4, 6, 8, 10, 12, 14, 16, 18]
    assert lst.cursor is lst.head
    assert lst.tail.next is None
    assert lst.head.prev is None


def test_empty_list():
    lst = empty_list()
    assert lst.head is None and lst.tail is None and lst.cursor is None


@pytest.mark.parametrize(
    "check, expected",
    [
        (check_create, 10),
        (check_first_next, 15),
        (check_last_prev, 10),
        (check_pop_current, 15),
    ],
)
def test_checks_without_rng_earn_full_score(check, expected):
    lines = []
    assert check(lines.append) == expected
    assert any(line.startswith("   [OK] ") for line in lines)


@pytest.mark.parametrize("check", [check_push_front, check_push_current])
def test_checks_with_rng_earn_full_score(check):
    lines = []
    assert check(lines.append, random.Random(7)) == 10
    assert not any("[FAILED]" in line for line in lines)


def test_check_create_logs_ok_line():
    lines = []
    check_create(lines.append)
    assert lines == ["   [OK] createList"]


def test_run_all_checks_reports_total():
    out = io.StringIO()
    results = run_checks(None, out, random.Random(1))
    assert len(results) == len(CHECKS)
    assert all(result.passed for result in results)
    assert "total_score: 70/70" in out.getvalue()
    assert "SUCCESS" not in out.getvalue()


def test_run_single_check_prints_success():
    out = io.StringIO()
    results = run_checks(3, out, random.Random(2))
    assert [result.check.id for result in results] == [3]
    text = out.getvalue()
    assert "Test pushFront..." in text
    assert text.rstrip().endswith("SUCCESS")
    assert "total_score" not in text


def test_check_result_passed_flag():
    check = CHECKS[0]
    assert CheckResult(check, check.max_score).passed
    assert not CheckResult(check, 0).passed


def test_check_failed_carries_partial_score():
    failure = CheckFailed("nextList retorna NULL", 5)
    assert failure.score == 5
    assert failure.message == "nextList retorna NULL"
    assert CheckFailed("x").score == 0


def test_main_single_check(capsys):
    assert main(["0"]) == 0
    out = capsys.readouterr().out
    assert "Test Create..." in out
    assert "SUCCESS" in out


def test_main_rejects_non_integer_id():
    with pytest.raises(SystemExit):
        main(["abc"])