"""Anchor dialects of the supported code-hosting platforms.

Each platform renders a heading into a link fragment with its own rules.
``Platform`` closes the set of dialects; looking up an unknown identifier
fails instead of silently producing anchors that point nowhere.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict
from urllib.parse import quote

from .errors import UnsupportedPlatformError
from .models import AnchoredHeader, Header

# Characters ``encodeURI`` leaves untouched besides ASCII letters and digits.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"
_ZERO_WIDTH_JOINER = "\u200d"

_ESCAPE_CODES = re.compile(r"%([abcdef]|\d){2}", re.IGNORECASE)
_GITHUB_PUNCTUATION = re.compile(r"[/?!:\[\]`.,()*\"';{}+=<>~$|#@&–—]")
_GITLAB_PUNCTUATION = re.compile(r"[/?!:\[\]`.,()*\"';{}+=<>~$|#@]")
_GHOST_PUNCTUATION = re.compile(r"[/?:\[\]`.,()*\"';{}\-+=<>!@#%^&\\|]")
_CJK_PUNCTUATION = re.compile(
    "[。？！，、；：“”【】（）"
    "〔〕［］﹃﹄‘’﹁﹂—…－"
    "～《》〈〉「」]"
)
_EMOJI = re.compile(
    "["
    "\U0001f000-\U0001faff"
    "\u2600-\u27bf"
    "\u2b00-\u2bff"
    "\ufe0f"
    "\U000e0020-\U000e007f"
    "]"
)
_HTML_ELEMENT = re.compile(r"<(.*)>(.*)</\1>")
_MARKDOWN_IMAGE = re.compile(r"!\[.*\]\(.*\)")
_MARKDOWN_LINK = re.compile(r"\[(.*)\]\(.*\)")
_NODEJS_INVALID = re.compile(r"[^a-z0-9]+")


class Platform(Enum):
    """Code-hosting platforms whose heading anchors doctoc can reproduce."""

    GITHUB = "github.com"
    BITBUCKET = "bitbucket.org"
    GITLAB = "gitlab.com"
    NODEJS = "nodejs.org"
    GHOST = "ghost.org"

    @classmethod
    def from_id(cls, identifier: str | Platform) -> Platform:
        """Resolve a platform identifier such as ``github.com``."""
        if isinstance(identifier, Platform):
            return identifier
        try:
            return cls(identifier)
        except ValueError:
            raise UnsupportedPlatformError(str(identifier)) from None

    @property
    def flag(self) -> str:
        """Short name used for command-line switches (``--gitlab``)."""
        return self.value.split(".", 1)[0]

    @property
    def indent(self) -> str:
        # Bitbucket and GitLab only nest list items indented by four spaces.
        if self in (Platform.BITBUCKET, Platform.GITLAB):
            return "    "
        return "  "

    def slug(self, text: str, instance: int = 0) -> str:
        """Return the URI-encoded fragment for ``text``.

        ``instance`` counts earlier headings with the same text in the same
        document; non-zero values get the platform's duplicate suffix.
        """
        raw = _SLUGGERS[self](_ascii_lower(text.strip()), instance)
        encoded = quote(raw, safe=_URI_SAFE)
        if self is Platform.GITHUB:
            # GitHub keeps joiners of emoji sequences unencoded.
            encoded = encoded.replace("%E2%80%8D", _ZERO_WIDTH_JOINER)
        return encoded


def anchor_for(header: Header, platform: Platform | str = Platform.GITHUB) -> AnchoredHeader:
    """Render the Markdown link for ``header``.

    Headers harvested from other documents link to ``path#slug`` instead of
    a same-document fragment.
    """
    resolved = Platform.from_id(platform)
    slug = resolved.slug(header.text, header.instance)
    target = f"{header.source_path}#{slug}" if header.source_path else f"#{slug}"
    return AnchoredHeader(header=header, anchor=f"[{header.text}]({target})")


def _ascii_lower(text: str) -> str:
    return "".join(char.lower() if "A" <= char <= "Z" else char for char in text)


def _basic_github_id(text: str) -> str:
    text = text.replace(" ", "-")
    text = _ESCAPE_CODES.sub("", text)
    text = _GITHUB_PUNCTUATION.sub("", text)
    return _CJK_PUNCTUATION.sub("", text)


def _github_id(text: str, instance: int) -> str:
    text = _basic_github_id(text)
    if instance:
        text += f"-{instance}"
    return _EMOJI.sub("", text)


def _bitbucket_id(text: str, instance: int) -> str:
    text = "markdown-header-" + _basic_github_id(text)
    if instance:
        text += f"_{instance}"
    return text


def _gitlab_id(text: str, instance: int) -> str:
    text = _HTML_ELEMENT.sub(r"\2", text)
    text = _MARKDOWN_IMAGE.sub("", text)
    text = _MARKDOWN_LINK.sub(r"\1", text, count=1)
    text = re.sub(r"\s+", "-", text)
    text = _GITLAB_PUNCTUATION.sub("", text)
    text = _CJK_PUNCTUATION.sub("", text)
    text = re.sub(r"-+", "-", text).strip("-")
    if instance:
        text += f"-{instance}"
    return text


def _nodejs_id(text: str, instance: int) -> str:
    text = _NODEJS_INVALID.sub("_", text).strip("_")
    text = re.sub(r"^([^a-z])", r"_\1", text)
    if instance:
        text += f"_{instance}"
    return text


def _ghost_id(text: str, instance: int) -> str:
    # Ghost does not disambiguate repeated headings.
    text = text.replace(" ", "")
    text = _GHOST_PUNCTUATION.sub("", text)
    return text.replace("$", "d").replace("~", "t")


_SLUGGERS: Dict[Platform, Callable[[str, int], str]] = {
    Platform.GITHUB: _github_id,
    Platform.BITBUCKET: _bitbucket_id,
    Platform.GITLAB: _gitlab_id,
    Platform.NODEJS: _nodejs_id,
    Platform.GHOST: _ghost_id,
}

DEFAULT_PLATFORM = Platform.GITHUB


__all__ = ["DEFAULT_PLATFORM", "Platform", "anchor_for"]
