from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and installs a global exception
hook so unexpected crashes are logged and reported on stderr.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Allow `python src/shelltree/main.py` from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions, log them and print the trace to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("shelltree.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (SHELLTREE CLI)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI controller.

    Returns:
        int: Standard process exit code.
    """
    from shelltree.interface.cli.app import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
