"""Command-line driver for the JoshBank approval chain.

Usage:
    joshbank evaluate --amount 2500 --id TXN100 --kind withdrawal
    joshbank batch transactions.json
    joshbank demo
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter, ValidationError
from pydantic_settings import SettingsError

from joshbank.approval.pipeline import EscalationPipeline
from joshbank.approval.reference import SAMPLE_TRANSACTIONS, pipeline_from_settings, reference_pipeline
from joshbank.core.config import AppSettings
from joshbank.core.exceptions import ConfigurationError
from joshbank.core.logger import setup_logging
from joshbank.models.approval import ApprovalResult, Approved
from joshbank.models.transaction import Priority, TransactionKind, TransactionRequest

EXIT_OK = 0
EXIT_CONFIG = 2

_batch_adapter = TypeAdapter(list[TransactionRequest])


def format_result(request: TransactionRequest, result: ApprovalResult) -> str:
    """One output line per request; unhandled amounts go to manual review."""
    prefix = f"{request.id} ${request.amount:,.2f}"
    if isinstance(result, Approved):
        return f"{prefix} -> approved by {result.handler_name}"
    return f"{prefix} -> no automatic approver; routing for manual review"


def _run(pipeline: EscalationPipeline, requests: Sequence[TransactionRequest]) -> int:
    for request, result in zip(requests, pipeline.evaluate_many(requests)):
        print(format_result(request, result))
    return EXIT_OK


def _cmd_evaluate(args: argparse.Namespace, settings: AppSettings) -> int:
    request = TransactionRequest(
        id=args.id,
        customer_id=args.customer_id,
        amount=args.amount,
        kind=args.kind,
        description=args.description,
        priority=args.priority,
    )
    return _run(pipeline_from_settings(settings), [request])


def _cmd_batch(args: argparse.Namespace, settings: AppSettings) -> int:
    requests = _batch_adapter.validate_json(Path(args.file).read_bytes())
    return _run(pipeline_from_settings(settings), requests)


def _cmd_demo(args: argparse.Namespace, settings: AppSettings) -> int:
    print("=== JoshBank Transaction Approval ===")
    return _run(reference_pipeline(), SAMPLE_TRANSACTIONS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="joshbank", description="Route transactions to their approver.")
    sub = parser.add_subparsers(dest="command", required=True)

    evaluate = sub.add_parser("evaluate", help="Evaluate a single transaction")
    evaluate.add_argument("--amount", required=True, help="Transaction amount, e.g. 2500.00")
    evaluate.add_argument("--id", default="TXN-CLI")
    evaluate.add_argument("--customer-id", default="")
    evaluate.add_argument("--kind", choices=[k.value for k in TransactionKind], default=TransactionKind.TRANSFER.value)
    evaluate.add_argument("--priority", choices=[p.value for p in Priority], default=Priority.LOW.value)
    evaluate.add_argument("--description", default="")
    evaluate.set_defaults(handler=_cmd_evaluate)

    batch = sub.add_parser("batch", help="Evaluate a JSON array of transactions")
    batch.add_argument("file", help="Path to a JSON file holding a list of transactions")
    batch.set_defaults(handler=_cmd_batch)

    demo = sub.add_parser("demo", help="Run the sample transactions through the reference chain")
    demo.set_defaults(handler=_cmd_demo)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = AppSettings()
        setup_logging(settings)
        return args.handler(args, settings)
    except (ConfigurationError, SettingsError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except OSError as exc:
        print(f"error: cannot read transactions: {exc}", file=sys.stderr)
        return EXIT_CONFIG


if __name__ == "__main__":
    sys.exit(main())
