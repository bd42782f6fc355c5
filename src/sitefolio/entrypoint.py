#!/usr/bin/env python3

import argparse
from pathlib import Path

from sitefolio.constants import NAME, PROGRAM
from sitefolio.context import Context


def prepare_context(raw_args: list[str]) -> None:
    parser = argparse.ArgumentParser(
        prog=NAME,
        description="Validate a site configuration and write its web app manifest "
        "and metadata for the site generator",
    )

    parser.add_argument(
        "-c",
        "--config",
        help="Path to the JSON site configuration",
        type=Path,
        dest="config_path",
        required=True,
    )

    outputs = parser.add_argument_group("Outputs")

    outputs.add_argument(
        "--output",
        help="Output folder for generated files. "
        "Defaults to SITEFOLIO_OUTPUT environment variable or ./output",
        type=Path,
        dest="output_dir",
    )

    outputs.add_argument(
        "--manifest-filename",
        help="Web app manifest file name. “manifest.webmanifest” otherwise",
        dest="manifest_filename",
    )

    outputs.add_argument(
        "--metadata-filename",
        help="Site metadata (title, heading, social links) file name. "
        "“site-metadata.json” otherwise",
        dest="metadata_filename",
    )

    advanced = parser.add_argument_group("Advanced")

    advanced.add_argument(
        "--check",
        help="Only validate the configuration, don't write anything",
        action="store_true",
        dest="check_only",
    )

    advanced.add_argument("--debug", help="Enable verbose output", action="store_true")

    parser.add_argument(
        "--version",
        help="Display version and exit",
        action="version",
        version=PROGRAM,
    )

    args = parser.parse_args(raw_args)

    # Ignore unset values so they do not override the default specified in Context
    args_dict = {key: value for key, value in args._get_kwargs() if value}

    Context.setup(**args_dict)
