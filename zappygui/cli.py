"""Command-line entry point of the graphical client."""

import sys

from zappygui.core import Core, CoreError

_USAGE = "USAGE: zappygui -p port -h machine"
_FLAGS = ("-p", "-h")
_EXIT_USAGE = 84


def check_args(argv):
    """Return 0 if the arguments have the form ``-p port -h machine``, else print usage and return 84."""
    argv = list(argv)
    if len(argv) != 4 or argv[0] not in _FLAGS or argv[2] not in _FLAGS:
        print(_USAGE)
        return _EXIT_USAGE
    return 0


def main(argv=None):
    """Validate the arguments and set up the client; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if check_args(argv) == _EXIT_USAGE:
        return _EXIT_USAGE
    try:
        Core(argv)
    except CoreError as error:
        print(f"Core error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())