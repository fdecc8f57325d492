import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional
from urllib.parse import unquote_to_bytes


_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

DEFAULT_NAME = "Cleibson Gomes"
DEFAULT_FOOTER_TEXT = "Made with ❤️ in Quebec, CA."
DEFAULT_EMAIL_CONTACT = "blog@nosbielc.com"


class MalformedURIError(ValueError):
    """Raised when an environment value is not valid percent-encoded UTF-8."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Malformed URI sequence ({reason}): {value!r}")
        self.value = value
        self.reason = reason


class SiteVariant(str, Enum):
    """Known deployments of the blog.

    They differ in the default title and in whether a contact email is exposed.
    """

    CODE_AND_COFFEE = "code-and-coffee"
    CODIGOS_JOGOS_CAFE = "codigos-jogos-cafe"

    @property
    def default_title(self) -> str:
        if self is SiteVariant.CODIGOS_JOGOS_CAFE:
            return "Códigos, Jogos e Café"
        return "Code And Coffee"

    @property
    def has_email_contact(self) -> bool:
        return self is SiteVariant.CODIGOS_JOGOS_CAFE


@dataclass(frozen=True)
class GlobalData:
    name: str
    blog_title: str
    footer_text: str
    email_contact: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "blogTitle": self.blog_title,
            "footerText": self.footer_text,
        }
        if self.email_contact is not None:
            data["emailContact"] = self.email_contact
        return data


def decode_uri(value: str) -> str:
    """Percent-decode ``value``, failing on malformed escapes or invalid UTF-8.

    ``+`` is kept as-is; unescaped text (including non-ASCII) passes through.
    """
    bad = _BAD_ESCAPE.search(value)
    if bad:
        raise MalformedURIError(value, f"invalid escape at index {bad.start()}")
    try:
        raw = value.encode("utf-8")
    except UnicodeEncodeError as e:
        # os.environ maps undecodable bytes to lone surrogates
        raise MalformedURIError(value, "value is not valid UTF-8") from e
    try:
        return unquote_to_bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedURIError(value, "escapes do not form valid UTF-8") from e


def _read(env: Mapping[str, str], key: str, default: str) -> str:
    value = env.get(key)
    return decode_uri(value) if value else default


def get_global_data(
    env: Optional[Mapping[str, str]] = None,
    variant: SiteVariant = SiteVariant.CODE_AND_COFFEE,
) -> GlobalData:
    """Build the site-wide display strings from ``env`` (``os.environ`` if omitted).

    Set, non-empty variables are percent-decoded; anything else falls back to
    the variant's defaults. A malformed value raises ``MalformedURIError`` and
    no record is returned.
    """
    if env is None:
        env = os.environ

    email_contact = None
    if variant.has_email_contact:
        email_contact = _read(env, "EMAIL_CONTACT", DEFAULT_EMAIL_CONTACT)

    return GlobalData(
        name=_read(env, "BLOG_NAME", DEFAULT_NAME),
        blog_title=_read(env, "BLOG_TITLE", variant.default_title),
        footer_text=_read(env, "BLOG_FOOTER_TEXT", DEFAULT_FOOTER_TEXT),
        email_contact=email_contact,
    )
