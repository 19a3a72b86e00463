"""String helpers used alongside the collection functions.

Every helper is locale independent unless its name says otherwise.
"""
from __future__ import annotations

import base64
import locale
import re
from typing import Any, Callable, List, Optional, Tuple, Union

_WORD_SPLIT_RE = re.compile(r'\s+')
_UCWORDS_SPLIT_RE = re.compile(r'(\s+\W+\s+|^\W+\s+|\s+)')


def float_to_string(number: Union[int, float]) -> str:
    """Render *number* with '.' as the decimal separator regardless of locale."""
    if isinstance(number, float):
        return repr(float(number))
    return str(number)


def normalize_number(value: Any) -> str:
    """Text form of *value* with the current locale's decimal point replaced by '.'."""
    text = str(value)
    decimal_point = locale.localeconv().get('decimal_point')
    if decimal_point and decimal_point != '.':
        text = text.replace(decimal_point, '.')
    return text


def byte_length(text: Union[str, bytes]) -> int:
    """Number of bytes in the UTF-8 encoding of *text*."""
    if isinstance(text, bytes):
        return len(text)
    return len(str(text).encode('utf-8'))


def byte_substr(text: Union[str, bytes], start: int, length: Optional[int] = None) -> bytes:
    """Slice *text* as a UTF-8 byte string."""
    data = text if isinstance(text, bytes) else str(text).encode('utf-8')
    if length is None:
        return data[start:]
    if length < 0:
        end = len(data) + length
        if start < 0:
            start = max(len(data) + start, 0)
        return data[start:end] if end > start else b''
    if start < 0:
        start = max(len(data) + start, 0)
    return data[start:start + length]


def basename(path: str, suffix: str = '') -> str:
    """Trailing name component of *path*; '/' and '\\' both separate."""
    if suffix and path.endswith(suffix):
        path = path[:-len(suffix)]
    path = path.replace('\\', '/').rstrip('/')
    pos = path.rfind('/')
    if pos != -1:
        return path[pos + 1:]
    return path


def dirname(path: str) -> str:
    """Parent directory of *path*; '' when there is none."""
    normalized = path.replace('\\', '/').rstrip('/')
    pos = normalized.rfind('/')
    if pos != -1:
        return path[:pos]
    return ''


def explode(
    text: str,
    delimiter: str = ',',
    trim: Union[bool, str, Callable[[str], str]] = True,
    skip_empty: bool = False,
) -> List[str]:
    """Split *text* on *delimiter*, optionally trimming and dropping empties.

    *trim* may be ``True`` (strip whitespace), a string of characters to
    strip, or a callable applied to every part.
    """
    parts = text.split(delimiter)
    if trim is not False:
        if trim is True:
            parts = [p.strip() for p in parts]
        elif callable(trim):
            parts = [trim(p) for p in parts]
        else:
            parts = [p.strip(trim) for p in parts]
    if skip_empty:
        parts = [p for p in parts if p != '']
    return parts


def count_words(text: str) -> int:
    return len([w for w in _WORD_SPLIT_RE.split(text) if w])


def base64_url_encode(data: Union[str, bytes]) -> str:
    """RFC 4648 URL-safe base64. Padding is kept."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    return base64.urlsafe_b64encode(data).decode('ascii')


def base64_url_decode(text: Union[str, bytes]) -> bytes:
    """Decode URL-safe base64; missing ``=`` padding is tolerated."""
    if isinstance(text, str):
        text = text.encode('ascii')
    text = text.rstrip(b'=')
    return base64.urlsafe_b64decode(text + b'=' * (-len(text) % 4))


def match_wildcard(
    pattern: str,
    text: str,
    case_sensitive: bool = True,
    escape: bool = True,
    file_path: bool = False,
) -> bool:
    """Match *text* against a shell wildcard *pattern*.

    Supports ``*``, ``?``, ``[...]`` and ``[!...]``. With *escape*, a
    backslash makes the next character literal. With *file_path*, ``*`` and
    ``?`` do not match path separators.
    """
    if pattern == '*' and not file_path:
        return True

    any_char = r'[^/\\]' if file_path else '.'
    out: List[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if escape and ch == '\\' and i + 1 < n:
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if ch == '*':
            out.append(any_char + '*')
        elif ch == '?':
            out.append(any_char)
        elif ch == '[':
            end = pattern.find(']', i + 1)
            if end == -1:
                out.append(re.escape(ch))
            else:
                body = pattern[i + 1:end]
                if body.startswith('!'):
                    body = '^' + body[1:]
                out.append('[' + body.replace('\\', '\\\\') + ']')
                i = end + 1
                continue
        else:
            out.append(re.escape(ch))
        i += 1

    flags = re.DOTALL
    if not case_sensitive:
        flags |= re.IGNORECASE
    return re.fullmatch(''.join(out), str(text), flags) is not None


def ucfirst(text: str) -> str:
    text = str(text)
    return text[:1].upper() + text[1:]


def ucwords(text: str) -> str:
    """Uppercase the first letter of every word, keeping separators intact."""
    text = str(text)
    if not text:
        return text
    parts = [p for p in _UCWORDS_SPLIT_RE.split(text) if p]
    # words sit on even positions unless the text opens with a separator
    words_on_odd = parts[0][-1:].strip() == ''
    for i, part in enumerate(parts):
        if (i % 2 == 1) == words_on_odd:
            parts[i] = ucfirst(part)
    return ''.join(parts)


def parse_callback(callback: str, default: Optional[str] = None) -> Tuple[str, Optional[str]]:
    """Split a ``Class@method`` callback into its two halves."""
    if '@' in callback:
        left, right = callback.split('@', 1)
        return left, right
    return callback, default


def parse_name(name: Optional[str], to_camel: bool = False, ucfirst_: bool = True) -> str:
    """Convert between CamelCase and snake_case.

    By default CamelCase is turned into snake_case. With *to_camel*, snake_case
    becomes CamelCase (lowerCamelCase when *ucfirst_* is false).
    """
    name = name or ''
    if to_camel:
        name = re.sub(r'_([a-zA-Z])', lambda m: m.group(1).upper(), name)
        if ucfirst_:
            return ucfirst(name)
        return name[:1].lower() + name[1:]
    return re.sub(r'[A-Z]', lambda m: '_' + m.group(0), name).strip('_').lower()
