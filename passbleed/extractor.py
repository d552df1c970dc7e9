"""
Domain extraction: raw URL or hostname field -> registrable domain.

Password managers store anything from ``example.com`` to
``https://login.example.co.uk:8443/auth?next=/``. Only the registrable domain
(public suffix plus one label) is meaningful when correlating against a leak
corpus, so every value is reduced to that form.

Public suffix handling is behind the ``SuffixResolver`` protocol. The default
``PublicSuffixResolver`` uses tldextract and its bundled Public Suffix List
snapshot unless live fetching is enabled in settings.
"""

from __future__ import annotations

import ipaddress
import re
from functools import lru_cache
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

import tldextract
from tldextract.tldextract import PUBLIC_SUFFIX_LIST_URLS

from passbleed.config import Settings, get_settings
from passbleed.domain.models import Domain
from passbleed.errors import MalformedURLError, UnregistrableHostError

DEFAULT_SCHEME = "http://"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


@runtime_checkable
class SuffixResolver(Protocol):
    """Reduces a hostname to its registrable domain."""

    def registrable_domain(self, hostname: str) -> str:
        """
        Return the effective TLD plus one label for ``hostname``.

        Raises
        ------
        UnregistrableHostError
            The hostname is itself a public suffix, an IP address, or has no
            recognised suffix.
        """
        ...


class PublicSuffixResolver:
    """SuffixResolver backed by the Public Suffix List via tldextract."""

    def __init__(
        self,
        fetch: bool = False,
        include_private: bool = True,
        cache_dir: Optional[str] = None,
    ) -> None:
        kwargs = {}
        if cache_dir:
            kwargs["cache_dir"] = cache_dir
        self._extract = tldextract.TLDExtract(
            suffix_list_urls=PUBLIC_SUFFIX_LIST_URLS if fetch else (),
            fallback_to_snapshot=True,
            include_psl_private_domains=include_private,
            **kwargs,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> PublicSuffixResolver:
        settings = settings or get_settings()
        return cls(
            fetch=settings.psl_fetch,
            include_private=settings.psl_private_domains,
            cache_dir=settings.psl_cache_dir,
        )

    def registrable_domain(self, hostname: str) -> str:
        """
        Hosts under a TLD missing from the list fall back to the implicit
        ``*`` rule: the last label is the suffix, so ``printer.lan`` stays
        ``printer.lan``.
        """
        try:
            ipaddress.ip_address(hostname)
        except ValueError:
            pass
        else:
            raise UnregistrableHostError(hostname, "ip address")

        parts = self._extract(hostname)
        if parts.suffix:
            if not parts.domain:
                raise UnregistrableHostError(hostname, "public suffix")
            return f"{parts.domain}.{parts.suffix}"

        labels = hostname.split(".")
        if len(labels) < 2 or not all(labels):
            raise UnregistrableHostError(hostname, "no registrable domain")
        return ".".join(labels[-2:])


@lru_cache(maxsize=1)
def get_default_resolver() -> PublicSuffixResolver:
    """Shared resolver so the suffix list is parsed once per process."""
    return PublicSuffixResolver.from_settings()


def parse_hostname(value: str) -> str:
    """
    Pull the hostname out of a URL or bare host value.

    Values without ``//`` get ``http://`` prepended first; otherwise the URL
    parser would read ``example.com/login`` as a path with an empty host.
    Surrounding whitespace (tabs and newlines included) is stripped before
    anything else; control characters left inside the value make it
    malformed. The result is lower-cased and stripped of a trailing root dot.
    """
    candidate = value.strip()
    if _CONTROL_CHARS.search(candidate):
        raise MalformedURLError(value, "control character in URL")
    if "//" not in candidate:
        candidate = DEFAULT_SCHEME + candidate
    try:
        hostname = urlsplit(candidate).hostname
    except ValueError as exc:
        raise MalformedURLError(value, str(exc)) from exc
    if hostname and hostname.endswith("."):
        hostname = hostname[:-1]
    if not hostname or any(ch.isspace() for ch in hostname):
        raise MalformedURLError(value, "no host in URL")
    return hostname


class DomainExtractor:
    """
    Turns raw URL fields into canonical domains.

    Stateless apart from the injected resolver; one instance can serve any
    number of loads.
    """

    def __init__(self, resolver: Optional[SuffixResolver] = None) -> None:
        self.resolver = resolver if resolver is not None else get_default_resolver()

    def extract(self, value: str) -> Domain:
        """
        Reduce ``value`` to its registrable domain.

        Raises
        ------
        MalformedURLError
            The value does not parse or carries no host.
        UnregistrableHostError
            The host cannot be reduced to a registrable domain.
        """
        hostname = parse_hostname(value)
        return Domain(self.resolver.registrable_domain(hostname))


__all__ = [
    "DEFAULT_SCHEME",
    "DomainExtractor",
    "PublicSuffixResolver",
    "SuffixResolver",
    "get_default_resolver",
    "parse_hostname",
]
