"""Entry point: python -m warpdir"""

from __future__ import annotations

import sys

from warpdir.infrastructure.logger import install_exception_hooks


def run() -> None:
    from warpdir.app import run_invocation

    install_exception_hooks()
    try:
        sys.exit(run_invocation(sys.argv[1:]))
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    run()
