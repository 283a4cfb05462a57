import pytest

from sfcplay.compiler.source_check import (
    MalformedSourceError,
    check_source,
    is_identifier,
    is_parameter,
    split_params,
)


@pytest.mark.parametrize(
    "source",
    [
        "",
        "const a = { b: [1, 2] }",
        "const s = 'a}'; const t = \"(\"",
        "const msg = `multi\nline ${count.value}`",
        "// } stray brace in a comment\nrun()",
        "/* { */ run()",
        "const q = 'it\\'s'",
    ],
)
def test_well_formed_sources_pass(source):
    assert check_source(source) is None


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("if (a) { b()", "Missing closing '}' for '{' (line 1)"),
        ("a()\nb(\n", "Missing closing ')' for '(' (line 2)"),
        (") ", "Unexpected token ')' (line 1)"),
        ("[1, 2}", "Unexpected token '}' (line 1)"),
        ("const s = 'abc", "Unterminated string literal (line 1)"),
        ("const s = 'abc\n'", "Unterminated string literal (line 1)"),
        ("x = `open", "Unterminated template literal (line 1)"),
        ("run()\n/* open", "Unterminated comment (line 2)"),
    ],
)
def test_malformed_sources_are_rejected(source, message):
    with pytest.raises(MalformedSourceError) as exc_info:
        check_source(source)

    assert str(exc_info.value) == message


def test_error_carries_line_number():
    with pytest.raises(MalformedSourceError) as exc_info:
        check_source("ok()\n\n}")

    assert exc_info.value.line == 3


@pytest.mark.parametrize(("name", "expected"), [("count", True), ("$el", True), ("_x1", True), ("1abc", False),
                                                ("return", False), ("a-b", False), ("", False)])
def test_is_identifier(name, expected):
    assert is_identifier(name) is expected


@pytest.mark.parametrize(("param", "expected"), [("value", True), ("...rest", True), ("step = 1", True),
                                                 ("{ a }", False), ("this", False)])
def test_is_parameter(param, expected):
    assert is_parameter(param) is expected


def test_split_params_drops_empty_entries():
    assert split_params(" a, b = 2 ,") == ("a", "b = 2")
    assert split_params("  ") == ()
