"""
python -m gogist login : store an access token
python -m gogist list  : print gist urls
python -m gogist new   : create a gist, print its url
"""

import sys
from typing import Optional, Sequence

from .config import APP_NAME, APP_USAGE, APP_VERSION

USAGE = f"Usage: {APP_NAME} <login|list|new> [options]  ({APP_USAGE})"


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in ("-h", "--help"):
        print(USAGE, file=sys.stderr)
        sys.exit(0 if args else 1)

    if args[0] in ("-V", "--version"):
        print(f"{APP_NAME} {APP_VERSION}")
        return

    if args[0] == "login":
        from .auth import main as auth_main

        auth_main(args[1:])
    else:
        from .client import main as client_main

        client_main(args)


if __name__ == "__main__":
    main()
