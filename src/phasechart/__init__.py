# SPDX-License-Identifier: MIT

from phasechart.cleanup import register_cleanup
from phasechart.terminal.app import run


def main() -> None:
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
