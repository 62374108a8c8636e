"""Entry point for `python -m sonicskin`."""

import sys


def main():
    from sonicskin.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
