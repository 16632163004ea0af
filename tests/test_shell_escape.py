import pytest

from versionfox.shell_escape import bash_escape, fish_escape, powershell_escape

SAMPLES = [
    "hello world",
    "it's",
    "back\\slash",
    "tab\there",
    "line\nbreak\r",
    "\x06\x01\x1f\x7f",
    "héllo wörld ✓",
    "PATH_WITH_1234",
    "$HOME/`cmd`;{x}|~^[]",
    "'",
]


def _decode_bash(quoted: str) -> str:
    if not (quoted.startswith("$'") and quoted.endswith("'")):
        return quoted
    body = quoted[2:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            nxt = body[i + 1]
            if nxt == "x":
                out.append(int(body[i + 2 : i + 4], 16))
                i += 4
                continue
            out += {"t": b"\t", "n": b"\n", "r": b"\r"}.get(nxt, nxt.encode())
            i += 2
            continue
        out += ch.encode()
        i += 1
    return out.decode("utf-8")


def _decode_fish(quoted: str) -> str:
    out = bytearray()
    in_quote = False
    i = 0
    while i < len(quoted):
        ch = quoted[i]
        if in_quote:
            if ch == "\\" and quoted[i + 1] in "'\\":
                out += quoted[i + 1].encode()
                i += 2
            elif ch == "'":
                in_quote = False
                i += 1
            else:
                out += ch.encode()
                i += 1
        else:
            if ch == "'":
                in_quote = True
                i += 1
            elif ch == "\\":
                nxt = quoted[i + 1]
                if nxt == "X":
                    out.append(int(quoted[i + 2 : i + 4], 16))
                    i += 4
                else:
                    out += {"t": b"\t", "n": b"\n", "r": b"\r"}[nxt]
                    i += 2
            else:
                raise AssertionError(f"unexpected unquoted char {ch!r}")
    assert not in_quote
    return out.decode("utf-8")


def test_empty_strings():
    assert bash_escape("") == "''"
    assert powershell_escape("") == "''"
    assert fish_escape("") == "''"


@pytest.mark.parametrize("text", ["ABC_123", "1.2.3", "/USR/BIN", "A-B,C@D"])
def test_bash_leaves_safe_text_unchanged(text):
    assert bash_escape(text) == text


def test_bash_quotes_space():
    assert bash_escape("a b") == "$'a b'"


@pytest.mark.parametrize("text", SAMPLES)
def test_bash_round_trip(text):
    assert _decode_bash(bash_escape(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_bash_output_is_single_line_ascii(text):
    result = bash_escape(text)
    assert result.isascii()
    assert "\n" not in result and "\r" not in result


@pytest.mark.parametrize("text", ["ABC_123", "X.Y", "A0"])
def test_powershell_leaves_safe_text_unchanged(text):
    assert powershell_escape(text) == text


def test_powershell_quote_escaped_with_backtick():
    assert powershell_escape("it's") == "'it`'s'"


@pytest.mark.parametrize("text", ["lower", "a b", "tab\t", "ünï"])
def test_powershell_wraps_when_escaping(text):
    result = powershell_escape(text)
    assert result.startswith("'") and result.endswith("'")
    assert "\n" not in result and "\t" not in result


def test_powershell_keeps_non_ascii_characters():
    result = powershell_escape("ünï")
    assert result[1:-1] == "ünï"


@pytest.mark.parametrize("text", SAMPLES)
def test_fish_round_trip(text):
    assert _decode_fish(fish_escape(text)) == text


def test_fish_tab_breaks_out_of_quotes():
    assert fish_escape("a\tb") == "'a'\\t'b'"


@pytest.mark.parametrize("text", SAMPLES)
def test_fish_always_quoted_ascii(text):
    result = fish_escape(text)
    assert result.startswith("'") and result.endswith("'")
    assert result.isascii()