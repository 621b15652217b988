"""Command line front end: browse a fund file, list its facets, look up a CNPJ."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

import fund_explorer
from fund_explorer.adapters.json_loader import LoadError
from fund_explorer.adapters.lookup_client import (
    IdentifierLookupClient,
    IdentifierLookupError,
)
from fund_explorer.config.loader import load_config
from fund_explorer.config.models import ExplorerConfig
from fund_explorer.domain.entities import PipelineResult, SortDirection
from fund_explorer.observability.observability_manager import ObservabilityManager
from fund_explorer.presentation.formatting import DisplayFormatter
from fund_explorer.session.explorer_session import ExplorerSession
from fund_explorer.validation.query_validator import QueryValidationError

LOAD_FAILED_MESSAGE = "Falha ao carregar o arquivo. Verifique se é um JSON válido."

COLUMN_HEADERS = [
    "Nome",
    "CNPJ",
    "Risco",
    "Aplicação inicial",
    "12 meses",
    "No ano",
    "No mês",
    "Taxa máx.",
    "Resgate",
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fund-explorer",
        description="Filter, sort and page through a JSON fund dataset.",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config.")
    parser.add_argument("--profile", help="Config profile name (e.g. compact).")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log pipeline events to stderr."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    browse = subparsers.add_parser("browse", help="Show one page of funds.")
    browse.add_argument("file", type=Path, help="JSON dataset file.")
    browse.add_argument("--name", default="", help="Name contains (case-insensitive).")
    browse.add_argument(
        "--risk",
        action="append",
        default=[],
        help="Risk category to include; repeat for several.",
    )
    browse.add_argument("--identifier", default="", help="CNPJ contains (punctuation ignored).")
    browse.add_argument("--sort", help="Sort column, e.g. nome, 12_meses, aplicacao_inicial.")
    browse.add_argument("--desc", action="store_true", help="Sort descending.")
    browse.add_argument("--page", type=int, default=1, help="1-based page number.")
    browse.add_argument("--page-size", type=int, help="Rows per page.")
    browse.add_argument("--compact", action="store_true", help="Compact layout.")
    browse.add_argument("--json", action="store_true", help="Print JSON instead of a table.")

    facets = subparsers.add_parser("facets", help="List risk categories.")
    facets.add_argument("file", type=Path, help="JSON dataset file.")

    lookup = subparsers.add_parser("lookup", help="Resolve a CNPJ to its fund page.")
    lookup.add_argument("identifier", help="CNPJ, punctuation allowed.")

    return parser


def _load_settings(args: argparse.Namespace) -> ExplorerConfig:
    return load_config(args.config, profile=args.profile)


def _configure_logging(config: ExplorerConfig, verbose: bool) -> Optional[ObservabilityManager]:
    level_name = "DEBUG" if verbose else config.logging_settings.level
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    fund_explorer.configure_logging(level)
    if not verbose:
        return None
    return ObservabilityManager(
        use_json=config.logging_settings.json_output,
        log_level=level,
        stream=sys.stderr,
        buffer_size=config.logging_settings.buffer_size,
    )


def _render_table(
    result: PipelineResult, formatter: DisplayFormatter, compact: bool
) -> List[str]:
    rows = [COLUMN_HEADERS]
    for record in result.page_items:
        row = formatter.format_row(record, compact)
        rows.append(
            [
                row.name,
                ", ".join(row.identifiers) or "-",
                row.risk,
                row.initial_investment,
                row.return_12_months,
                row.return_year_to_date,
                row.return_month_to_date,
                row.max_fee,
                row.redemption_term,
            ]
        )

    widths = [max(len(line[i]) for line in rows) for i in range(len(COLUMN_HEADERS))]
    lines = [
        " | ".join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip()
        for line in rows
    ]
    lines.insert(1, "-+-".join("-" * width for width in widths))
    return lines


def _browse(args: argparse.Namespace, session: ExplorerSession) -> int:
    formatter = DisplayFormatter(session.config.display)
    session.set_compact(args.compact or session.compact)
    session.load_file(args.file)

    if args.page_size is not None:
        session.set_page_size(args.page_size)
    if args.sort:
        direction = SortDirection.DESC if args.desc else SortDirection.ASC
        session.set_sort(args.sort, direction)
    elif args.desc:
        session.set_sort(session.query.sort_column, SortDirection.DESC)
    session.set_filters(
        name=args.name, risk_categories=args.risk, identifier=args.identifier
    )
    result = session.go_to_page(args.page)

    if args.json:
        payload = {
            "items": [
                record.model_dump(by_alias=True, mode="json")
                for record in result.page_items
            ],
            "pagination": {
                **result.pagination.model_dump(),
                "has_previous": result.pagination.has_previous,
                "has_next": result.pagination.has_next,
            },
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    if result.pagination.total_items == 0:
        print("Nenhum fundo encontrado." if len(session.dataset) else "Arquivo sem fundos.")
        return 0

    for line in _render_table(result, formatter, session.compact):
        print(line)
    print()
    print(formatter.pagination_summary(result.pagination, session.compact))
    if result.pagination.total_pages <= 1:
        return 0
    if session.compact:
        print(formatter.page_indicator(result.pagination))
    else:
        print(formatter.page_window_text(result.pagination))
    return 0


def _facets(args: argparse.Namespace, session: ExplorerSession) -> int:
    session.load_file(args.file)
    formatter = DisplayFormatter(session.config.display)
    if not session.facets:
        print("Nenhum risco definido.")
        return 0
    for category in session.facets:
        print(f"{category}\t{formatter.risk_label(category, session.compact)}")
    return 0


def _lookup(args: argparse.Namespace, config: ExplorerConfig) -> int:
    client = IdentifierLookupClient(config.lookup)
    try:
        result = client.resolve(args.identifier)
    except IdentifierLookupError as e:
        print(
            f"Não foi possível buscar o fundo com CNPJ {e.identifier}: {e.message}",
            file=sys.stderr,
        )
        return 1
    if not result.found:
        print(
            f"Não foi possível encontrar o fundo com CNPJ {args.identifier}.",
            file=sys.stderr,
        )
        return 1
    print(result.redirect_url)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_settings(args)
    except FileNotFoundError as e:
        print(f"Config not found: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 2

    observability = _configure_logging(config, args.verbose)

    if args.command == "lookup":
        return _lookup(args, config)

    session = ExplorerSession(config=config, observability=observability)
    try:
        if args.command == "facets":
            return _facets(args, session)
        return _browse(args, session)
    except LoadError:
        print(LOAD_FAILED_MESSAGE, file=sys.stderr)
        return 1
    except QueryValidationError as e:
        print(e.message, file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
