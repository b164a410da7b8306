"""Conversion between text and bytes in numbered code pages."""

from __future__ import annotations

import codecs
import locale

_NAMED_CODE_PAGES = {
    1200: "utf-16-le",
    1201: "utf-16-be",
    20127: "ascii",
    28591: "latin-1",
    65000: "utf-7",
    65001: "utf-8",
}


def _codec_for(code_page: int) -> str:
    if code_page == 0:
        name = locale.getpreferredencoding(False)
    else:
        name = _NAMED_CODE_PAGES.get(code_page, f"cp{code_page}")
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise ValueError(f"unsupported code page {code_page}") from None


def decode_code_page(code_page: int, data: bytes) -> str:
    """Decode ``data`` from a numbered code page (0 is the system default).

    Input ends at the first NUL byte; undecodable bytes become U+FFFD.
    """
    codec = _codec_for(code_page)
    data = bytes(data).split(b"\x00", 1)[0]
    return data.decode(codec, errors="replace")


def encode_code_page(code_page: int, text: str) -> bytes:
    """Encode ``text`` into a numbered code page (0 is the system default).

    Input ends at the first NUL character; characters the code page cannot
    hold become ``?``.
    """
    codec = _codec_for(code_page)
    text = text.split("\x00", 1)[0]
    return text.encode(codec, errors="replace")