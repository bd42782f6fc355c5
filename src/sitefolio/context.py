from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from zimscraperlib.logging import DEFAULT_FORMAT, getLogger

from sitefolio.constants import MANIFEST_FILENAME, METADATA_FILENAME, NAME


@dataclass(kw_only=True)
class Context:
    """Class holding every contextual / configuration bits of a run

    One singleton instance is available once `setup()` has been called.
    """

    # singleton instance
    _instance: ClassVar[Context | None] = None

    # JSON site configuration to load
    config_path: Path

    # filesystem
    output_dir: Path = Path(os.getenv("SITEFOLIO_OUTPUT", "./output"))
    manifest_filename: str = MANIFEST_FILENAME
    metadata_filename: str = METADATA_FILENAME

    # only validate configuration, do not write anything
    check_only: bool = False

    debug: bool = False

    # logger to use everywhere (do not mind about mutability, we want to reuse same
    # logger everywhere)
    logger: logging.Logger = getLogger(  # noqa: RUF009
        NAME, level=logging.INFO, log_format=DEFAULT_FORMAT
    )

    @classmethod
    def setup(cls, **kwargs: Any):
        new_instance = cls(**kwargs)
        if cls._instance:
            # replace values 'in-place' so that we do not change the Context object
            # which might be already imported in some modules
            for field in dataclasses.fields(new_instance):
                cls._instance.__setattr__(
                    field.name, new_instance.__getattribute__(field.name)
                )
        else:
            cls._instance = new_instance

    @classmethod
    def get(cls) -> Context:
        if not cls._instance:
            raise OSError("Uninitialized context")  # pragma: no cover
        return cls._instance

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / self.manifest_filename

    @property
    def metadata_path(self) -> Path:
        return self.output_dir / self.metadata_filename
