"""Entry point for `python -m claude_statusline`."""

import sys


def main():
    from claude_statusline.app import run
    sys.exit(run())


if __name__ == "__main__":
    main()
