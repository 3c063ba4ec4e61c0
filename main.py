import sys

from commanddeck.core.config import ConfigManager
from commanddeck.core.logging import setup_logging
from commanddeck.demo import run_all


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config = ConfigManager(argv[0] if argv else "settings.json")
    settings = config.data

    setup_logging(
        debug_mode=settings.general.debug_mode,
        log_dir=settings.log_dir,
        rotation=settings.logging.rotation,
        retention=settings.logging.retention,
    )

    run_all(party_volume=settings.demo.party_volume)
    return 0


if __name__ == "__main__":
    sys.exit(main())
