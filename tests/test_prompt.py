from __future__ import annotations

import asyncio
import io

import pytest

from koa_api.prompt import confirm, is_affirmative


def _ask(answer: str) -> tuple[bool, str]:
    stdin = io.StringIO(answer)
    stdout = io.StringIO()
    result = asyncio.run(confirm("continue? [y/N] ", stdin=stdin, stdout=stdout))
    return result, stdout.getvalue()


@pytest.mark.parametrize("answer", ["y\n", "Yes\n", "OK\n", "true\n", "  YES  \n", "y"])
def test_confirm_accepts_affirmative_answers(answer):
    accepted, output = _ask(answer)
    assert accepted is True
    assert output == "continue? [y/N] "


@pytest.mark.parametrize("answer", ["", "\n", "n\n", "nope\n", "yes please\n", "0\n"])
def test_confirm_rejects_everything_else(answer):
    accepted, _ = _ask(answer)
    assert accepted is False


def test_confirm_reads_a_single_line():
    stdin = io.StringIO("no\nyes\n")
    assert asyncio.run(confirm("? ", stdin=stdin, stdout=io.StringIO())) is False
    assert stdin.readline() == "yes\n"


def test_is_affirmative_is_case_insensitive():
    assert is_affirmative("TrUe")
    assert not is_affirmative("false")
