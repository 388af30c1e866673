# viewfinder/parsing/parser.py
from __future__ import annotations

import argparse

from viewfinder.constants import DEFAULT_MAX_DEPTH


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="viewfinder",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "viewfinder – print a Rails view with every partial it renders\n"
            "TARGET is a template path under the application root (e.g.\n"
            "app/views/users/show.html.erb) or a route name such as users_path."
        ),
    )

    g_tgt = p.add_argument_group("Target")
    g_mode = p.add_argument_group("Resolution")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_tgt.add_argument("target", metavar="TARGET", help="Template path or route name.")
    g_tgt.add_argument(
        "-r",
        "--root",
        metavar="DIR",
        dest="root",
        help=(
            "Application root. When omitted, the nearest parent directory of the "
            "current one that contains config/application.rb is used."
        ),
    )
    g_tgt.add_argument(
        "-n",
        "--namespace",
        metavar="NS",
        dest="namespace",
        help="Only consider routes whose controller lives in this namespace.",
    )
    g_tgt.add_argument(
        "--routes",
        metavar="FILE",
        dest="routes_file",
        help=(
            "Read the route table from FILE (JSON, or saved `rails routes` output) "
            "instead of running bin/rails routes."
        ),
    )

    g_mode.add_argument(
        "--no-partials",
        action="store_false",
        dest="partials",
        help="Print only the requested template; do not follow render calls.",
    )
    g_mode.add_argument(
        "--no-embed",
        action="store_false",
        dest="embed",
        help=(
            "List each partial after the template instead of inlining it at the "
            "point of reference."
        ),
    )
    g_mode.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        dest="max_depth",
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum partial nesting depth (default {DEFAULT_MAX_DEPTH}).",
    )

    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the result to FILE instead of stdout.",
    )
    g_out.add_argument(
        "--no-reindent",
        action="store_false",
        dest="reindent",
        help="Keep template lines exactly as written (skip reindentation).",
    )
    g_out.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print a JSON resolution report to stderr when done.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also VIEWFINDER_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    return p
