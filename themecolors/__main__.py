"""Entry point for `python -m themecolors`."""

import sys


def main():
    from themecolors.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
