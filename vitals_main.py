"""Entry point for VITALS."""

import sys

from vitals import app


def main():
    sys.exit(app.run())


if __name__ == "__main__":
    main()
