#!/usr/bin/env python3

import pathlib

from sitefolio.__about__ import __version__

ROOT_DIR = pathlib.Path(__file__).parent


NAME = "sitefolio"
VERSION = __version__

UTF8 = "utf-8"
PROGRAM = f"{NAME} v{VERSION}"

# web app manifest
MANIFEST_SHORT_NAME_MAX_LENGTH = 12
DISPLAY_MODES = ("fullscreen", "standalone", "minimal-ui", "browser")
MANIFEST_FILENAME = "manifest.webmanifest"
METADATA_FILENAME = "site-metadata.json"

# schemes social links may point to
LINK_SCHEMES = ("mailto", "https")
