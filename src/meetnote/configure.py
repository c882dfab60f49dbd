"""Add a meeting app to config.json: meetnote-add-app "Microsoft Teams" """

import argparse
import logging
import sys

from .adapters.config_file import add_meeting_app
from .config import config
from .core.errors import ConfigError

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Add a meeting app to config.json")
    parser.add_argument("app_name", help="application name as reported by the detector")
    parser.add_argument("--config", default=str(config.CONFIG_PATH), help="configuration file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        added = add_meeting_app(args.config, args.app_name)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    if added:
        print(f'Added "{args.app_name}" to meeting apps.')
    else:
        print(f'"{args.app_name}" is already in the meeting apps list.')


if __name__ == "__main__":
    main()
