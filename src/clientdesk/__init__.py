# SPDX-License-Identifier: MIT

from clientdesk.cleanup import register_cleanup
from clientdesk.initialize import initialize
from clientdesk.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
