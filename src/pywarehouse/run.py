"""Direct entry point for the pywarehouse command.

Installed as the ``pywarehouse`` console script. Imports and executes
the main function from __main__.py.
"""

import sys


def main() -> int:
    """Entry point for pywarehouse command.

    Returns:
        Exit code
    """
    from pywarehouse.__main__ import main as _main
    return _main()


if __name__ == "__main__":
    sys.exit(main())
