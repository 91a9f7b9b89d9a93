import argparse
import signal
import sys

from .config import load_config
from .logging_config import setup_logging
from .state import LauncherState


def print_results(state, query, out=sys.stdout):
    state.set_query(query)
    for app, score in state.result_applications():
        print(f"{score:>12}  {app.name}  ({app.id})", file=out)


def signal_handler(sig, frame):
    sys.exit(0)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="quicklaunch", description="Search and launch installed applications.")
    parser.add_argument("--query", help="print the ranked matches for QUERY instead of opening a window")
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(config)
    state = LauncherState.from_config(config)

    if args.query is not None:
        print_results(state, args.query)
        return 0

    from .window import Gtk, LauncherWindow

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    win = LauncherWindow(state)
    win.connect("destroy", lambda w: Gtk.main_quit())
    win.show_all()
    win.search_entry.grab_focus()
    Gtk.main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
