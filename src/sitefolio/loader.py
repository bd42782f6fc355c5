#!/usr/bin/env python3

""" Build a SiteConfig from user-provided data

    Data is either a mapping or a JSON file. Keys use either the camelCase names
    of JS site generators configs (`siteTitle`, `manifestShortName`…) or the
    snake_case attribute names of SiteConfig."""

import collections
import dataclasses
import json
import pathlib
import re
from collections.abc import Mapping
from typing import Any

from sitefolio.constants import UTF8
from sitefolio.context import Context
from sitefolio.models import SiteConfig, SocialLink
from sitefolio.utils.exceptions import ConfigValidationError

logger = Context.logger

CONFIG_FIELDS = [field.name for field in dataclasses.fields(SiteConfig)]
LINK_FIELDS = [field.name for field in dataclasses.fields(SocialLink)]


def snake_case(key: str) -> str:
    """`manifestShortName` -> `manifest_short_name`"""
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key).lower()


def normalize_keys(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    normalized = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise ConfigValidationError(f"{prefix}{key!r}", "keys must be strings")
        name = snake_case(key)
        if name in normalized:
            raise ConfigValidationError(f"{prefix}{name}", "set more than once")
        normalized[name] = value
    return normalized


def check_keys(data: dict[str, Any], expected: list[str], prefix: str = ""):
    for key in data:
        if key not in expected:
            raise ConfigValidationError(f"{prefix}{key}", "unknown setting")
    for key in expected:
        if key not in data:
            raise ConfigValidationError(f"{prefix}{key}", "is required")


def check_string(value: Any, field: str):
    if not isinstance(value, str):
        raise ConfigValidationError(
            field, f"expected a string, got {type(value).__name__}"
        )


def parse_social_link(data: Any, index: int) -> SocialLink:
    prefix = f"social_links[{index}]."
    if not isinstance(data, Mapping):
        raise ConfigValidationError(
            f"social_links[{index}]", f"expected an object, got {type(data).__name__}"
        )
    data = normalize_keys(data, prefix=prefix)
    check_keys(data, LINK_FIELDS, prefix=prefix)
    for key in LINK_FIELDS:
        check_string(data[key], f"{prefix}{key}")
    return SocialLink(**data)


def warn_duplicate_names(links: list[SocialLink]):
    counts = collections.Counter(link.name for link in links)
    for name, count in counts.items():
        if count > 1:
            logger.warning(f"Social link name `{name}` is used {count} times")


def parse_config(data: Mapping[str, Any]) -> SiteConfig:
    """SiteConfig from a mapping of settings"""
    if not isinstance(data, Mapping):
        raise ConfigValidationError(
            "<root>", f"expected an object, got {type(data).__name__}"
        )
    data = normalize_keys(data)
    # social_links is required in files even though SiteConfig defaults it
    check_keys(data, CONFIG_FIELDS)

    for key in CONFIG_FIELDS:
        if key != "social_links":
            check_string(data[key], key)

    if not isinstance(data["social_links"], list | tuple):
        raise ConfigValidationError(
            "social_links",
            f"expected a list, got {type(data['social_links']).__name__}",
        )
    links = [
        parse_social_link(link, index)
        for index, link in enumerate(data["social_links"])
    ]
    warn_duplicate_names(links)
    data["social_links"] = tuple(links)

    return SiteConfig(**data)


def load_config(source: Mapping[str, Any] | str | pathlib.Path) -> SiteConfig:
    """SiteConfig from a mapping or the path to a JSON file"""
    if isinstance(source, Mapping):
        return parse_config(source)

    fpath = pathlib.Path(source)
    logger.debug(f"Loading site configuration from {fpath}")
    with open(fpath, "r", encoding=UTF8) as fh:
        data = json.load(fh)
    return parse_config(data)
