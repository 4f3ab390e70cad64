import logging

from . import settings


def main():
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
    # The sensor poll hits the server every 5 s; keep request lines out of the console
    logging.getLogger('werkzeug').setLevel(logging.ERROR)

    from .app import run
    run()


if __name__ == "__main__":
    main()
