"""Quoting of strings for bash, PowerShell and fish."""

from __future__ import annotations

_ACK = 6
_TAB = 9
_LF = 10
_CR = 13
_US = 31
_AMPERSAND = 38
_SINGLE_QUOTE = 39
_PLUS = 43
_NINE = 57
_QUESTION = 63
_UPPERCASE_Z = 90
_OPEN_BRACKET = 91
_BACKSLASH = 92
_CLOSE_BRACKET = 93
_UNDERSCORE = 95
_BACKTICK = 96
_TILDE = 126
_DEL = 127


def bash_escape(text: str) -> str:
    """Quote a string for bash.

    The result is wrapped in ``$'...'`` when any byte needs escaping; control
    characters become ANSI escapes and non-ASCII bytes become hex codes, so the
    result is always a single line of ASCII.
    """
    if text == "":
        return "''"
    out = bytearray()
    escape = False
    for char in text.encode("utf-8"):
        if char == _ACK:
            out += b"\\x%02x" % char
            escape = True
        elif char == _TAB:
            out += b"\\t"
            escape = True
        elif char == _LF:
            out += b"\\n"
            escape = True
        elif char == _CR:
            out += b"\\r"
            escape = True
        elif char <= _US:
            out += b"\\x%02x" % char
            escape = True
        elif char <= _AMPERSAND:
            out.append(char)
            escape = True
        elif char == _SINGLE_QUOTE:
            out += bytes((_BACKSLASH, char))
            escape = True
        elif char <= _PLUS:
            out.append(char)
            escape = True
        elif char <= _NINE:
            out.append(char)
        elif char <= _QUESTION:
            out.append(char)
            escape = True
        elif char <= _UPPERCASE_Z:
            out.append(char)
        elif char == _OPEN_BRACKET:
            out.append(char)
            escape = True
        elif char == _BACKSLASH:
            out += bytes((_BACKSLASH, char))
            escape = True
        elif char == _UNDERSCORE:
            out.append(char)
        elif char <= _TILDE:
            out.append(char)
            escape = True
        else:
            out += b"\\x%02x" % char
            escape = True
    result = out.decode("ascii")
    return f"$'{result}'" if escape else result


def powershell_escape(text: str) -> str:
    """Quote a string for PowerShell.

    The result is wrapped in single quotes when any character needs quoting;
    a single quote is escaped with a backtick.
    """
    if text == "":
        return "''"
    out = bytearray()
    escape = False
    for char in text.encode("utf-8"):
        if char == _ACK:
            out += b"\\x%02x" % char
            escape = True
        elif char == _TAB:
            out += b"`t"
            escape = True
        elif char == _LF:
            out += b"`n"
            escape = True
        elif char == _CR:
            out += b"`r"
            escape = True
        elif char <= _US:
            out += b"\\x%02x" % char
            escape = True
        elif char == _SINGLE_QUOTE:
            out += bytes((_BACKTICK, char))
            escape = True
        elif char <= _PLUS:
            out.append(char)
            escape = True
        elif char <= _UPPERCASE_Z:
            out.append(char)
        elif char == _UNDERSCORE:
            out.append(char)
        elif char == _DEL:
            out += b"\\x%02x" % char
            escape = True
        else:
            out.append(char)
            escape = True
    result = out.decode("utf-8")
    return f"'{result}'" if escape else result


def fish_escape(text: str) -> str:
    """Quote a string for fish; the result is always single-quoted."""
    out = bytearray(b"'")
    for char in text.encode("utf-8"):
        if char == _TAB:
            out += b"'\\t'"
        elif char == _LF:
            out += b"'\\n'"
        elif char == _CR:
            out += b"'\\r'"
        elif char <= _US:
            out += b"'\\X%02x'" % char
        elif char in (_SINGLE_QUOTE, _BACKSLASH):
            out += bytes((_BACKSLASH, char))
        elif char <= _TILDE:
            out.append(char)
        else:
            out += b"'\\X%02x'" % char
    out += b"'"
    return out.decode("ascii")