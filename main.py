import sys

import config_paths
from dispatcher import DispatchResult
from editor_state import EditorState
from logging_config import disable_logging, get_logger, setup_logging
from mapping_writer import MappingWriter
from orchestrator import Orchestrator
from terminal_session import run_ui

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


USAGE = (
    "kvedit - build a key/value mapping in the terminal and emit it as JSON\n\n"
    "Usage:\n  kvedit [-o path.json|path.csv|path.parquet]\n  kvedit -v\n  kvedit -h\n\n"
    "Keys:\n  e  new pair    q  quit\n"
    "  Tab switch key/value    Enter next/commit    Esc cancel\n"
)


class UsageError(Exception):
    pass


def _parse_args(args):
    opts = {"version": False, "help": False, "output": None}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("-v", "-V"):
            opts["version"] = True
        elif arg == "-h":
            opts["help"] = True
        elif arg == "-o":
            if i + 1 >= len(args):
                raise UsageError("-o requires a path")
            opts["output"] = args[i + 1]
            i += 1
        else:
            raise UsageError(f"unknown argument: {arg}")
        i += 1
    return opts


def _run(output_path=None) -> int:
    cfg = config_paths.load_config()
    try:
        config_paths.ensure_config_dirs()
        setup_logging(config_paths.LOG_PATH, cfg["LOG_LEVEL"])
    except OSError as e:
        # editor runs without a log file; keep records off stderr
        disable_logging()
        print(f"kvedit: logging disabled ({e})", file=sys.stderr)
    logger = get_logger("main")

    try:
        writer = MappingWriter(
            output_path, indent=cfg["OUTPUT_INDENT"], sort_keys=cfg["SORT_KEYS"]
        )
    except (ValueError, RuntimeError) as e:
        print(f"kvedit: {e}", file=sys.stderr)
        return 1

    state = EditorState()
    logger.info("starting kvedit %s, output to %s", __version__, writer.describe())

    try:
        result = run_ui(
            lambda stdscr: Orchestrator(stdscr, state).run(),
            escdelay=cfg["ESCDELAY"],
        )
    except KeyboardInterrupt:
        logger.info("interrupted by user")
        print("Interrupted", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error("terminal session failed", exc_info=True)
        print(f"kvedit: {e}", file=sys.stderr)
        return 1

    if result is not DispatchResult.EXIT_AND_EMIT:
        logger.info("exited without output")
        return 0

    try:
        writer.write(state.mapping)
    except Exception as e:
        logger.error("writing output to %s failed", writer.describe(), exc_info=True)
        print(f"kvedit: {e}", file=sys.stderr)
        return 1

    logger.info("wrote %d pairs to %s", len(state.mapping), writer.describe())
    return 0


def main():
    try:
        opts = _parse_args(sys.argv[1:])
    except UsageError as e:
        print(f"kvedit: {e}\n\n{USAGE}", file=sys.stderr)
        sys.exit(1)

    if opts["version"]:
        print(__version__)
        return

    if opts["help"]:
        print(USAGE)
        return

    sys.exit(_run(opts["output"]))


if __name__ == "__main__":
    main()
