import sys

from loguru import logger

from sportsclinic.config import ClinicConfig
from sportsclinic.factory import build_session
from sportsclinic.shell.console import ClinicConsole


def main() -> None:
    config = ClinicConfig()
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    session = build_session(config)
    try:
        ClinicConsole(session).run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Session interrupted")


if __name__ == "__main__":
    main()
