from __future__ import annotations

import argparse
import logging

from ._shell import DEFAULT_PROMPT, TreeShell

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="memtree",
        description="Interactive shell over an in-memory directory tree.",
    )
    parser.add_argument("--prompt", default=DEFAULT_PROMPT)
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    TreeShell(prompt=args.prompt).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
