import sys

from sitefolio.context import Context
from sitefolio.entrypoint import prepare_context
from sitefolio.utils.exceptions import ConfigValidationError

logger = Context.logger


def main(raw_args: list[str] | None = None):

    try:
        prepare_context(sys.argv[1:] if raw_args is None else raw_args)

        # import this only once the Context has been initialized, so that it gets an
        # initialized context
        from sitefolio.builder import SiteBuilder  # noqa: PLC0415

        builder = SiteBuilder()
        builder.run()
    except SystemExit as exc:
        if exc.code not in (0, None):
            logger.error("Build failed, exiting")
        raise
    except ConfigValidationError as exc:
        logger.critical(f"Invalid site configuration: {exc}")
        raise SystemExit(2) from exc
    except Exception as exc:
        logger.exception(exc)
        logger.error(f"Build failed with the following error: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
