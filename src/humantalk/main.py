from humantalk.config import Settings
from humantalk.logging import init_logger, logger
from humantalk.talk import Config
from humantalk.version import VERSION


def main() -> None:
    settings = Settings()
    init_logger(settings.log_level)
    logger.info(
        "Starting humantalk demo version={version} include_debug={include_debug}",
        version=VERSION,
        include_debug=settings.include_debug,
    )

    config = Config(include_debug=settings.include_debug)
    config.error("this is what an error looks like")
    config.warning("this is what a warning looks like")
    config.info("this is what information looks like")
    config.debug("this is what debugging looks like")
    config.info(config.machine_info())


if __name__ == "__main__":  # pragma: no cover
    main()
