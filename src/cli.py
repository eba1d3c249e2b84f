"""Batch entry point for the fraud engine.

Usage:
    python -m src.cli score --input transactions.jsonl
    python -m src.cli calibrate --input history.jsonl
    python -m src.cli evaluate --input labelled.jsonl --calibrate history.jsonl

Inputs are JSON lines, one transaction per line ("-" reads stdin). Evaluation
reads a boolean label from each line (``is_fraud`` by default).
"""

import argparse
import json
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

import structlog
from pydantic import ValidationError

from src.config import settings
from src.domains.fraud import (
    FraudDetectionEngine,
    FraudEngineError,
    InMemoryHistoryStore,
    Transaction,
)
from src.shared.logging import setup_logging

logger = structlog.get_logger()


def _open(path: str) -> TextIO:
    if path == "-":
        return sys.stdin
    return open(path)


def read_records(path: str) -> Iterator[dict]:
    stream = _open(path)
    try:
        for line_no, line in enumerate(stream, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{line_no}: invalid JSON ({exc.msg})") from exc
    finally:
        if stream is not sys.stdin:
            stream.close()


def read_transactions(path: str) -> list[Transaction]:
    return [Transaction.model_validate(record) for record in read_records(path)]


def read_labelled(path: str, label_field: str) -> tuple[list[Transaction], list[bool]]:
    transactions: list[Transaction] = []
    labels: list[bool] = []
    for record in read_records(path):
        if label_field not in record:
            raise ValueError(f"Record {record.get('id')!r} has no '{label_field}' label")
        label = record.pop(label_field)
        # Only JSON booleans; "false" or 0 must not count as fraud
        if not isinstance(label, bool):
            raise ValueError(
                f"Record {record.get('id')!r} has a non-boolean '{label_field}' label: {label!r}"
            )
        labels.append(label)
        transactions.append(Transaction.model_validate(record))
    return transactions, labels


def _emit(payload: dict, out: TextIO) -> None:
    out.write(json.dumps(payload, default=str) + "\n")


def _score(engine: FraudDetectionEngine, args: argparse.Namespace, out: TextIO) -> int:
    failures = 0
    for record in read_records(args.input):
        try:
            transaction = Transaction.model_validate(record)
            analysis = engine.analyze(transaction)
        except (ValidationError, FraudEngineError) as exc:
            failures += 1
            _emit({"transactionId": record.get("id"), "error": str(exc)}, out)
            continue
        _emit(analysis.model_dump(mode="json", by_alias=True), out)
    return 2 if failures else 0


def _calibrate(engine: FraudDetectionEngine, args: argparse.Namespace, out: TextIO) -> int:
    summary = engine.calibrate(read_transactions(args.input))
    _emit(summary.model_dump(mode="json", by_alias=True), out)
    return 0


def _evaluate(engine: FraudDetectionEngine, args: argparse.Namespace, out: TextIO) -> int:
    transactions, labels = read_labelled(args.input, args.label_field)
    metrics = engine.evaluate(transactions, labels)
    _emit(metrics.model_dump(mode="json", by_alias=True), out)
    return 0


_COMMANDS = {
    "score": _score,
    "calibrate": _calibrate,
    "evaluate": _evaluate,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fraud risk engine batch jobs")
    parser.add_argument("command", choices=sorted(_COMMANDS), help="Which job to run")
    parser.add_argument("--input", type=str, default="-", help="JSON-lines input ('-' for stdin)")
    parser.add_argument(
        "--calibrate",
        type=str,
        default=None,
        help="JSON-lines history to calibrate on before scoring or evaluating",
    )
    parser.add_argument(
        "--label-field", type=str, default="is_fraud", help="Label key for evaluate"
    )
    parser.add_argument("--output-file", type=str, default=None, help="Write results here")
    parser.add_argument("--log-level", type=str, default=settings.log_level)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, settings.log_format)

    engine = FraudDetectionEngine.from_settings(settings, history=InMemoryHistoryStore())

    out: TextIO = sys.stdout
    if args.output_file:
        Path(args.output_file).parent.mkdir(parents=True, exist_ok=True)
        out = open(args.output_file, "w")

    try:
        if args.calibrate:
            engine.calibrate(read_transactions(args.calibrate))
        return _COMMANDS[args.command](engine, args, out)
    except (ValueError, OSError) as exc:
        logger.error("batch_job_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if out is not sys.stdout:
            out.close()


if __name__ == "__main__":
    sys.exit(main())
