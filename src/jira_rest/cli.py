"""Command line helpers: dump field metadata and preview JQL searches."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

import httpx

from .config import load_config, load_local_env
from .context import RequestContext
from .jira_api import JiraAPI
from .logging_setup import configure_logging

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Jira REST client utilities")
    parser.add_argument("--config", default="config/jira.yml", help="Path to the client configuration file")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    dump = commands.add_parser("dump-fields", help="Write field metadata to a JSON file")
    dump.add_argument("--output", default="out/fields.json", help="Destination JSON file")

    search = commands.add_parser("search", help="Print the first issues matching a JQL query")
    search.add_argument("--jql", required=True, help="JQL query to execute")
    search.add_argument("--fields", default="summary,issuetype,priority", help="Comma separated list of fields")
    search.add_argument("--max", type=int, default=5, help="Maximum number of issues to display")
    return parser.parse_args(argv)


def dump_fields(api: JiraAPI, ctx: RequestContext, output: Path) -> int:
    fields, _ = api.issue.field.gets(ctx)
    output.parent.mkdir(parents=True, exist_ok=True)
    payload = [field.model_dump(by_alias=True, exclude_none=True) for field in fields]
    output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    LOGGER.info("Wrote %s field definitions", len(fields))
    return len(fields)


def preview_issues(api: JiraAPI, ctx: RequestContext, jql: str, fields: Sequence[str], limit: int) -> int:
    page, _ = api.issue.search.post(ctx, jql, fields=fields, max_results=limit)
    for issue in page.issues[:limit]:
        print(issue.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    LOGGER.info("Displayed %s of %s issues", min(len(page.issues), limit), page.total)
    return len(page.issues[:limit])


def main(argv: Sequence[str] | None = None, *, transport: httpx.BaseTransport | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    load_local_env()
    config = load_config(args.config)
    ctx = RequestContext(timeout=args.timeout)
    with JiraAPI.from_config(config, transport=transport) as api:
        me, _ = api.myself.details(ctx)
        LOGGER.info("Authenticated as %s", me.display_name or me.account_id)
        if args.command == "dump-fields":
            dump_fields(api, ctx, Path(args.output))
        else:
            fields = [field.strip() for field in args.fields.split(",") if field.strip()]
            preview_issues(api, ctx, args.jql, fields, args.max)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
