from pathlib import Path

import pytest
from sexpr.errors import UnexpectedToken, UnterminatedList
from sexpr.parser import Parser, parse_all
from sexpr.printer import to_string
from sexpr.values import Identifier, String, iterate

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples" / "forms"


def load_source(name: str) -> str:
    path = EXAMPLES_DIR / name
    if not path.exists():
        pytest.skip(f"example file not found: {path}")
    return path.read_text()


@pytest.fixture
def list_ops():
    return parse_all(load_source("list_ops.scm"))


def test_list_ops_reads_every_form(list_ops):
    assert len(list_ops) == 5
    heads = [form.head for form in list_ops]
    assert heads == [
        Identifier("define"),
        Identifier("define"),
        Identifier("define"),
        Identifier("define-syntax"),
        Identifier("display"),
    ]


def test_list_ops_dotted_pairs(list_ops):
    pairs = list_ops[1]
    quoted = list(pairs)[2]
    alist = list(quoted)[1]
    tails = [list(iterate(entry))[-1] for entry in alist]
    assert [to_string(t) for t in tails] == ["1", "2", "3.14"]


def test_list_ops_string_keeps_escapes(list_ops):
    assert list(list_ops[2])[2] == String('hello, \\"world\\"')


def test_list_ops_round_trip(list_ops):
    printed = "\n".join(to_string(form) for form in list_ops)
    assert parse_all(printed) == list_ops


def test_broken_file_reports_each_error():
    parser = Parser(load_source("broken.scm"))
    results = []
    while True:
        try:
            form = parser.next_form()
        except UnexpectedToken as e:
            results.append(("error", e.line))
            continue
        except UnterminatedList as e:
            results.append(("unterminated", e.line))
            continue
        if form is None:
            break
        results.append(("form", to_string(form)))
    assert results == [
        ("form", "(first ok)"),
        ("error", 1),
        ("form", "(third ok)"),
        ("unterminated", 3),
    ]
