"""
Wrapping of generated code into a final artifact: banner with content hash
and timestamp, then whitespace canonicalization.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .canonical import canonicalize
from .providers import Clock, ContentHasher, SystemClock, format_timestamp

logger = logging.getLogger(__name__)

OPEN_TAG = "<?php"

_FENCE_TOP = "/*" + "-" * 54
_FENCE_BOTTOM = "-" * 48 + "*/"


def split_open_tag(body: str) -> tuple[bool, str]:
    """Separate a leading `<?php` tag from the rest of the body."""
    if body.startswith(OPEN_TAG):
        return True, body[len(OPEN_TAG):]
    return False, body


def format_banner(name: str, generated_at: datetime, generator: str, content_hash: str) -> str:
    return "\n".join([
        f"{_FENCE_TOP}%{int(generated_at.timestamp())}%-",
        "",
        f"   Name      : {name}",
        f"   Generated : {format_timestamp(generated_at)}",
        f"   Generator : {generator}",
        "",
        "   Do not edit it manually.",
        "",
        f"-#{content_hash}#{_FENCE_BOTTOM}",
    ])


@dataclass(frozen=True)
class RenderedArtifact:
    name: str
    generator: str
    generated_at: datetime
    content_hash: str
    body: str
    text: str

    def __str__(self) -> str:
        return self.text


class ArtifactBuilder:
    """
    Builds RenderedArtifact objects.

    The content hash covers the body without its leading open tag, so it is
    independent of the banner and of the timestamp.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        hasher: Optional[ContentHasher] = None,
        indent: int = 4,
    ):
        self.clock = clock or SystemClock()
        self.hasher = hasher or ContentHasher()
        self.indent = indent

    def content_hash(self, body: str) -> str:
        _, code = split_open_tag(body)
        return self.hasher.hexdigest(code)

    def wrap(self, body: str, *, name: str, generator: str) -> RenderedArtifact:
        has_tag, code = split_open_tag(body)
        digest = self.hasher.hexdigest(code)
        generated_at = self.clock.now()

        parts = [OPEN_TAG] if has_tag else []
        parts.append(format_banner(name, generated_at, generator, digest))
        code = code.lstrip("\r\n")
        if code.strip():
            parts.append(code)

        text = canonicalize("\n\n".join(parts), self.indent)
        logger.debug(f"Wrapped artifact '{name}' ({len(text)} chars, hash {digest})")

        return RenderedArtifact(
            name=name,
            generator=generator,
            generated_at=generated_at,
            content_hash=digest,
            body=body,
            text=text,
        )


__all__ = ["ArtifactBuilder", "RenderedArtifact", "format_banner", "split_open_tag", "OPEN_TAG"]
