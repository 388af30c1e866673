from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from viewfinder.core.errors import ViewFinderError
from viewfinder.core.models import FinderOptions
from viewfinder.finder import ViewFinder, find_app_root
from viewfinder.logging.factory import DefaultLoggerFactory
from viewfinder.logging.helpers import get_logger
from viewfinder.parsing.parser import _build_parser
from viewfinder.runtime.container import FinderBuilder, FinderConfig

logger = get_logger('viewfinder')


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev == (bool(enable_json), level):
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('viewfinder')
    setattr(_configure_logging, '_configured_mode', (bool(enable_json), level))


def build_finder(ns: argparse.Namespace) -> ViewFinder:
    """Wire a ViewFinder from parsed CLI arguments."""
    app_root = Path(ns.root).resolve() if ns.root else find_app_root()
    options = FinderOptions(
        partials=ns.partials,
        embed=ns.embed,
        namespace=ns.namespace or None,
        max_depth=ns.max_depth,
    )
    cfg = FinderConfig(
        app_root=app_root,
        options=options,
        routes_file=Path(ns.routes_file) if ns.routes_file else None,
        reindent=ns.reindent,
    )
    return FinderBuilder.from_config(cfg).build()


class ViewFinderCLI:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, finder: Optional[ViewFinder] = None) -> str:
        """Run the tool with given argv-like sequence and return final text."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('VIEWFINDER_JSON_LOGS') == '1'
        _configure_logging(json_logs, logging.DEBUG if ns.verbose else logging.INFO)

        vf = finder or build_finder(ns)
        result = vf.find(ns.target)

        if ns.output:
            out = Path(ns.output)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(result, encoding='utf-8')
            logger.info('✔ output written → %s', out)
        else:
            sys.stdout.write(result)
            if result and not result.endswith('\n'):
                sys.stdout.write('\n')

        if ns.report:
            sys.stderr.write(vf.report.to_json() + '\n')
        return result


def main() -> NoReturn:
    """Entry point for the `viewfinder` console script."""
    try:
        ViewFinderCLI.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except ViewFinderError as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
