from __future__ import annotations

import base64

AUDIO_MIME = "audio/mpeg"
_DATA_URI_PREFIX = f"data:{AUDIO_MIME};base64,"


def to_data_uri(audio: bytes) -> str:
    """Wrap raw MP3 bytes as a playable base64 data URI."""
    return _DATA_URI_PREFIX + base64.b64encode(audio).decode("ascii")


def from_data_uri(uri: str) -> bytes:
    if not uri.startswith(_DATA_URI_PREFIX):
        raise ValueError(f"not an {AUDIO_MIME} base64 data URI")
    return base64.b64decode(uri[len(_DATA_URI_PREFIX):], validate=True)


def looks_like_mp3(audio: bytes) -> bool:
    """True if the payload opens with an ID3 tag or an MPEG frame sync."""
    if audio[:3] == b"ID3":
        return True
    return len(audio) >= 2 and audio[0] == 0xFF and (audio[1] & 0xE0) == 0xE0
