"""Command-line entry point for the disk space alert check."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
import sys

from config import ConfigController
from core.logging import configure_logging, enable_file_logging, log_error, log_info, logger
from services.diskspace import (
    AlertDispatcher,
    ConfigError,
    DiskSpaceOrchestrator,
    DispatchError,
    RunReport,
    SlackClient,
    StatError,
    parse_threshold_spec,
)


LOG_FILE_NAME = "diskspace_alert.log"


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Raw command-line arguments.

    Returns:
        Parsed arguments namespace.
    """

    parser = argparse.ArgumentParser(
        description="Alert a Slack channel about mounts running low on free space."
    )
    parser.add_argument(
        "-disk",
        type=str,
        default=None,
        help="Disk names as Strings, separated by space. (config default: '/ /tmp')",
    )
    parser.add_argument(
        "-threshold",
        type=str,
        default=None,
        help=(
            "Integers representing the minimum percentage of free space before "
            "alerting, separated by spaces. (config default: '10 10')"
        ),
    )
    parser.add_argument(
        "-target",
        type=str,
        default=None,
        help="Target person or channel on Slack. (config default: '#target_slack_channel')",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override the configured logging level.",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Run diagnostics probes and exit.",
    )
    return parser.parse_args(argv)


def print_report(report: RunReport) -> None:
    """Print one confirmation line per alert Slack accepted.

    Args:
        report: Result of a disk space run, complete or partially failed.
    """

    for outcome in report.sent:
        print(f"{outcome.timestamp} - Message sent to {outcome.channel}")


def main(argv: list[str] | None = None) -> int:
    """Application entry point.

    Args:
        argv: Optional list of command-line arguments.

    Returns:
        Process exit code.
    """

    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)
    config = ConfigController.get_instance().get_config()
    configure_logging(args.log_level or config["logging_level"])

    if args.diagnostics:
        from diagnostics.run import run_live

        return run_live()

    if config["file_logging_enabled"]:
        log_file_path = Path(config["log_dir"]) / LOG_FILE_NAME
        enable_file_logging(log_file_path)
        logger.info("Writing logs to %s", log_file_path)

    disk_cfg = config["diskspace"]
    slack_cfg = config["slack"]
    disks = args.disk if args.disk is not None else disk_cfg["disks"]
    thresholds = args.threshold if args.threshold is not None else disk_cfg["thresholds"]
    target = args.target if args.target is not None else disk_cfg["target"]

    try:
        spec = parse_threshold_spec(disks, thresholds)
        spec.pairs()
    except ConfigError as exc:
        log_error(f"Configuration error: {exc}")
        return 1

    client = SlackClient(
        token=os.getenv(slack_cfg["token_env"], ""),
        api_url=slack_cfg["api_url"],
        timeout_s=slack_cfg["timeout_s"],
    )
    if not client.enabled:
        log_error(f"Please set the {slack_cfg['token_env']} environment variable.")
        return 1

    orchestrator = DiskSpaceOrchestrator(
        AlertDispatcher(client),
        max_workers=disk_cfg["max_workers"],
    )

    try:
        report = orchestrator.run(spec, target)
    except ConfigError as exc:
        log_error(f"Configuration error: {exc}")
        return 1
    except StatError as exc:
        log_error(str(exc))
        return 1
    except DispatchError as exc:
        print_report(exc.report)
        for outcome in exc.failed:
            log_error(f"{outcome.state.name}: {outcome.error}")
        log_error(str(exc))
        return 1

    print_report(report)
    log_info(f"Checked {len(report.states)} disk(s), {len(report.sent)} alert(s) sent", style="bold green")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
