#!/usr/bin/env python3

import logging

from sitefolio.loader import load_config
from sitefolio.manifest import write_manifest, write_site_metadata
from sitefolio.models import SiteConfig
from sitefolio.utils.shared import context, logger


class SiteBuilder:
    """Loads the site configuration then hands manifest and metadata to the generator"""

    def __init__(self):
        level = logging.DEBUG if context.debug else logging.INFO
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

        self.config: SiteConfig | None = None

    def run(self):
        logger.info(f"Loading site configuration from {context.config_path}")
        self.config = load_config(context.config_path)
        logger.info(
            f"Configuration for “{self.config.site_title}” is valid "
            f"({len(self.config.social_links)} social links)"
        )
        for link in self.config.social_links:
            logger.debug(f"  {link.name}: {link.url}")

        if context.check_only:
            logger.info("Check only, not writing anything")
            return

        write_manifest(self.config, context.manifest_path)
        write_site_metadata(self.config, context.metadata_path)
        logger.info(
            f"Wrote {context.manifest_filename} and {context.metadata_filename} "
            f"to {context.output_dir}"
        )
