#!/usr/bin/env python3
"""
Command line entry point.

    forest-sentinel search "Palisades"
    forest-sentinel serve --port 8000
"""

import argparse
import json
import sys

from .logging_setup import setup_logging


def cmd_search(args) -> int:
    from .errors import ForestSentinelError
    from .service import SearchService

    try:
        result = SearchService().search(args.query)
    except ForestSentinelError as e:
        print(json.dumps({"success": False, "error": str(e)}, indent=args.indent), file=sys.stderr)
        return 1
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=args.indent))
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("forest_sentinel.api:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="forest-sentinel", description="Forest fire risk from satellite and weather data")
    ap.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("search", help="Run one search and print the JSON envelope")
    sp.add_argument("query", help='Place name or "lat, lon"')
    sp.add_argument("--indent", type=int, default=2)
    sp.set_defaults(func=cmd_search)

    sv = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    sv.add_argument("--host", default="0.0.0.0")
    sv.add_argument("--port", type=int, default=8000)
    sv.add_argument("--reload", action="store_true", default=False)
    sv.set_defaults(func=cmd_serve)

    args = ap.parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
