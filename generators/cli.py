"""CLI entry point for synthetic data generators.

Usage:
    python -m generators transaction --seed 42 --count 1000
    python -m generators transaction --config generators/configs/transaction.yaml --output file
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from .transaction_generator import TransactionGenerator

GENERATORS = {
    "transaction": TransactionGenerator,
}


def _load_config(path: str | None) -> dict:
    if not path:
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Fraud risk engine synthetic data generators")
    parser.add_argument("generator", choices=sorted(GENERATORS), help="Which generator to run")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=1000, help="Number of records to generate")
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output file path")
    parser.add_argument(
        "--no-labels",
        action="store_true",
        help="Drop the is_fraud label (for score/calibrate input)",
    )
    args = parser.parse_args(argv)

    generator = GENERATORS[args.generator](config=_load_config(args.config), seed=args.seed)
    records = generator.generate(args.count)

    if args.no_labels:
        for record in records:
            record.pop("is_fraud", None)

    lines = [json.dumps(record, default=str) for record in records]
    if args.output == "stdout":
        for line in lines:
            print(line)
        return

    output_path = Path(args.output_file or f"output/{args.generator}s.jsonl")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("".join(line + "\n" for line in lines))
    print(f"Wrote {len(records)} records to {output_path}", file=sys.stderr)
