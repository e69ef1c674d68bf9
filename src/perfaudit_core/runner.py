"""
perfaudit-core CLI Runner

Minimal CLI for evaluating a metric snapshot against a rule set and
dispatching the notification actions.

Usage:
    python -m perfaudit_core.runner --metrics audit.json --rules rules.json
    python -m perfaudit_core.runner --metrics audit.json --rules rules.json --dispatch

Use the default thresholds from the environment (PERFAUDIT_THRESHOLD_*) instead of a rule file:
    python -m perfaudit_core.runner --metrics audit.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd
from dotenv import load_dotenv

from perfaudit_core.domain.entities import PipelineResult
from perfaudit_core.infrastructure.notifiers.factory import create_notifiers
from perfaudit_core.notifier_config import load_config
from perfaudit_core.report import summarize_statuses, verdicts_to_dataframe
from perfaudit_core.rule_loader import (
    RuleSet,
    build_threshold_rules,
    enabled_rules,
    load_metrics,
    load_rule_set,
)
from perfaudit_core.rules.evaluator import evaluate
from perfaudit_core.use_cases.actions import execute_actions


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="perfaudit-core: Evaluate performance metrics against threshold rules",
    )
    parser.add_argument(
        "--metrics",
        required=True,
        help="Path to the metric snapshot JSON file",
    )
    parser.add_argument(
        "--rules",
        default=None,
        help="Path to the rule set JSON file (default: rules from PERFAUDIT_THRESHOLD_* in .env)",
    )
    parser.add_argument(
        "--dispatch",
        action="store_true",
        help="Run the rule set's actions when there are violations",
    )
    parser.add_argument(
        "--run-id",
        default=None,
        help="Run ID used in the report file name (default: current timestamp)",
    )
    parser.add_argument(
        "--output-dir",
        default="results",
        help="Directory for the verdict CSV report (default: results)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = load_config()

    # Load inputs
    metrics = load_metrics(args.metrics)
    if args.rules:
        rule_set = load_rule_set(args.rules)
    else:
        rule_set = RuleSet(rules=build_threshold_rules(config.thresholds.configured()))
    rules = enabled_rules(rule_set.rules)

    run_id = args.run_id if args.run_id else datetime.now().strftime("%Y%m%d_%H%M%S")

    print(f"\n=== Evaluating: {args.metrics} ===\n")
    print(f"  Metrics: {len(metrics)}")
    print(f"  Rules:   {len(rules)} enabled / {len(rule_set.rules)} total")
    print(f"  Actions: {len(rule_set.actions)}")
    print(f"  Run ID:  {run_id}")
    print()

    # Step 1: Evaluate
    evaluation = evaluate(metrics, rules)

    # Step 2: Dispatch
    outcomes = []
    if args.dispatch:
        outcomes = execute_actions(evaluation, rule_set.actions, create_notifiers(config))

    pipeline = PipelineResult(evaluation=evaluation, action_results=tuple(outcomes))

    # Step 3: Report
    report_df = verdicts_to_dataframe(metrics, rules)
    counts = summarize_statuses(report_df)
    print("=== Verdicts ===\n")
    print(f"  {'Metric':<24} {'Status':>6} {'Value':>12} {'Threshold':>12}")
    print(f"  {'-'*24} {'-'*6} {'-'*12} {'-'*12}")
    for _, row in report_df.iterrows():
        value = "-" if pd.isna(row["value"]) else f"{row['value']:.2f}"
        print(f"  {row['metric']:<24} {row['status']:>6} {value:>12} {row['threshold']:>12.2f}")
    print()
    print(
        f"  pass={counts['pass']} warn={counts['warn']} "
        f"fail={counts['fail']} skip={counts['skip']}"
    )
    print()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    report_path = output_dir / f"verdicts_{run_id}.csv"
    report_df.to_csv(report_path, index=False)

    print("=== Result ===\n")
    print(json.dumps(pipeline.to_dict(), indent=2, ensure_ascii=False))
    print()
    print(f"  Report: {report_path}")
    print()

    if not pipeline.passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
