"""
nextsize CLI

Entry point: environment loading, argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from cli.wiring import build_parser, dispatch_command
from nextsize import __version__


def _load_environment(env_file: Optional[Path] = None) -> None:
    """Load .env (cwd by default); project values override exported NEXTSIZE_* variables."""
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env", override=True)


def main(argv: Optional[list] = None) -> int:
    _load_environment()
    parser = build_parser(version=__version__)
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    sys.exit(main())
