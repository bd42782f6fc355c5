#!/usr/bin/env python

""" Syntactic checks for social links targets

    Only two kinds of targets are accepted:

    - mailto:someone@example.com    (optionally with ?subject=… headers)
    - https://example.com/some/path (absolute URL with a host)

    Characters are checked against RFC 3986: unreserved, reserved and
    percent-encoded octets only, each component limited to its own set.
    Hosts must be DNS names, IPv4 addresses or bracketed IPv6 addresses.
    """

import ipaddress
import re
import urllib.parse

from sitefolio.constants import LINK_SCHEMES

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*):")

UNRESERVED = r"A-Za-z0-9\-._~"
SUB_DELIMS = r"!$&'()*+,;="
PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

# any character allowed somewhere in a URI
URI_CHARS_RE = re.compile(
    rf"^(?:[{UNRESERVED}{SUB_DELIMS}:/?#\[\]@]|{PCT_ENCODED})*$"
)
USERINFO_RE = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}:]|{PCT_ENCODED})*$")
PATH_RE = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}:@/]|{PCT_ENCODED})*$")
QUERY_RE = re.compile(rf"^(?:[{UNRESERVED}{SUB_DELIMS}:@/?]|{PCT_ENCODED})*$")
# DNS labels (also matches dotted IPv4), optional trailing dot
HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}\.?$)"
    r"[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
    r"(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*\.?$",
    re.IGNORECASE,
)


def get_scheme(url: str) -> str:
    """lowercased scheme of url ; empty string if there is none"""
    match = SCHEME_RE.match(url)
    return match.groupdict()["scheme"].lower() if match else ""


def has_forbidden_chars(url: str) -> bool:
    """whether url contains whitespace or control characters"""
    return any(char.isspace() or ord(char) < 32 or ord(char) == 127 for char in url)


def check_host(host: str):
    """host part of an authority, IPv6 addresses with their brackets"""
    if host.startswith("["):
        if not host.endswith("]"):
            raise ValueError(f"invalid IP literal `{host}`")
        try:
            address = ipaddress.ip_address(host[1:-1])
        except ValueError as exc:
            raise ValueError(f"invalid IP literal `{host}`") from exc
        if address.version != 6:
            raise ValueError(f"only IPv6 addresses go in brackets: `{host}`")
        return
    if not HOSTNAME_RE.match(host):
        raise ValueError(f"invalid host `{host}`")


def check_components(uri: urllib.parse.SplitResult):
    if not PATH_RE.match(uri.path):
        raise ValueError(f"invalid characters in path `{uri.path}`")
    if not QUERY_RE.match(uri.query):
        raise ValueError(f"invalid characters in query `{uri.query}`")
    if not QUERY_RE.match(uri.fragment):
        raise ValueError(f"invalid characters in fragment `{uri.fragment}`")


def check_mailto(uri: urllib.parse.SplitResult):
    if uri.netloc:
        raise ValueError("mailto URI cannot have an authority part")
    if not uri.path:
        raise ValueError("mailto URI has no address")
    for address in uri.path.split(","):
        if address.count("@") != 1:
            raise ValueError(f"invalid email address `{address}`")
        local, domain = address.split("@")
        if not local:
            raise ValueError(f"invalid email address `{address}`")
        domain = urllib.parse.unquote(domain)
        if domain.startswith("["):
            check_host(domain)
        elif not HOSTNAME_RE.match(domain):
            raise ValueError(f"invalid email domain `{domain}`")


def check_https(uri: urllib.parse.SplitResult):
    if not uri.netloc or not uri.hostname:
        raise ValueError("https URL must be absolute and include a host")
    userinfo, _, hostport = uri.netloc.rpartition("@")
    if not USERINFO_RE.match(userinfo):
        raise ValueError(f"invalid characters in userinfo `{userinfo}`")
    if hostport.startswith("["):
        host = hostport[: hostport.find("]") + 1]
    else:
        host = hostport.partition(":")[0]
    check_host(host)
    # accessing port validates it (raises ValueError if out of range/not numeric)
    uri.port  # noqa: B018


def check_link_url(url: str) -> str:
    """scheme of a valid social link url, raising ValueError otherwise"""
    if not url:
        raise ValueError("URL is empty")
    if has_forbidden_chars(url):
        raise ValueError("URL contains whitespace or control characters")

    scheme = get_scheme(url)
    if not scheme:
        raise ValueError(f"URL has no scheme: `{url}`")
    if scheme not in LINK_SCHEMES:
        raise ValueError(
            f"unsupported scheme `{scheme}`. Use "
            + " or ".join(f"{name}:" for name in LINK_SCHEMES)
        )
    if not URI_CHARS_RE.match(url):
        raise ValueError(f"URL contains characters not allowed in URIs: `{url}`")

    # urlsplit raises ValueError on some malformed netlocs (IPv6 for instance)
    uri = urllib.parse.urlsplit(url)
    check_components(uri)
    if scheme == "mailto":
        check_mailto(uri)
    else:
        check_https(uri)
    return scheme
