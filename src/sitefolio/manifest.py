#!/usr/bin/env python3

import json
import mimetypes
import pathlib
from typing import Any

from sitefolio.constants import UTF8
from sitefolio.context import Context
from sitefolio.models import SiteConfig

logger = Context.logger


def build_icons(config: SiteConfig) -> list[dict[str, str]]:
    icon = {"src": config.manifest_icon}
    mimetype, _ = mimetypes.guess_type(config.manifest_icon)
    if mimetype:
        icon["type"] = mimetype
    return [icon]


def build_manifest(config: SiteConfig) -> dict[str, Any]:
    """Web app manifest document for config"""
    return {
        "name": config.manifest_name,
        "short_name": config.manifest_short_name,
        "start_url": config.manifest_start_url,
        "background_color": config.manifest_background_color,
        "theme_color": config.manifest_theme_color,
        "display": config.manifest_display,
        "icons": build_icons(config),
    }


def navigation_entries(config: SiteConfig) -> list[dict[str, str]]:
    """social links as navigation entries, in display order"""
    return [
        {"icon": link.icon, "name": link.name, "url": link.url}
        for link in config.social_links
    ]


def build_site_metadata(config: SiteConfig) -> dict[str, Any]:
    """Page-level details: document title, author, heading and navigation"""
    return {
        "title": config.site_title,
        "author": config.author_name,
        "heading": config.heading,
        "social_links": navigation_entries(config),
    }


def write_json(document: dict[str, Any], fpath: pathlib.Path) -> pathlib.Path:
    fpath.parent.mkdir(parents=True, exist_ok=True)
    with open(fpath, "w", encoding=UTF8) as fh:
        json.dump(document, fh, ensure_ascii=False, indent=2)
        fh.write("\n")
    logger.debug(f"Wrote {fpath}")
    return fpath


def write_manifest(config: SiteConfig, fpath: pathlib.Path) -> pathlib.Path:
    return write_json(build_manifest(config), fpath)


def write_site_metadata(config: SiteConfig, fpath: pathlib.Path) -> pathlib.Path:
    return write_json(build_site_metadata(config), fpath)
