import sys
import logging

from pathgrid.app import App
from pathgrid.config import LOG_LEVEL, LOG_FORMAT


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = App()
    app.run()
    sys.exit()


if __name__ == "__main__":
    main()
