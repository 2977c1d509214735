"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the approval service
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional

from approval_chain._version import __version__
from approval_chain.application.service import ApprovalService
from approval_chain.cli.formatters import format_output
from approval_chain.config.manager import ConfigurationManager
from approval_chain.domain.base.exceptions import DomainException
from approval_chain.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "approval-chain",
        description="Approval Chain - route leave requests through an approval hierarchy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s submit 2                      # Ask for 2 days of leave
  %(prog)s submit 0.5 5 10 --format table
  %(prog)s chain show                    # Show who can approve what
  %(prog)s --config chain.yml submit 4   # Use a custom chain
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "yaml", "table"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Print tracebacks on failure")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    submit_parser = subparsers.add_parser("submit", help="Submit leave requests")
    submit_parser.add_argument(
        "days", type=float, nargs="+", help="Number of days requested (one or more requests)"
    )

    chain_parser = subparsers.add_parser("chain", help="Inspect the approval chain")
    chain_subparsers = chain_parser.add_subparsers(dest="action", help="Chain actions")
    chain_subparsers.add_parser("show", help="Show the configured handlers")

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, service: ApprovalService) -> Dict[str, Any]:
    """Execute the parsed command and return its result."""
    if args.command == "submit":
        if len(args.days) == 1:
            outcomes = [service.submit(args.days[0])]
        else:
            outcomes = service.submit_many(args.days)
        return {"outcomes": [outcome.to_dict() for outcome in outcomes]}

    if args.command == "chain" and args.action == "show":
        return {"chain": service.describe_chain()}

    raise ValueError(f"Unsupported command: {args.command} {getattr(args, 'action', '') or ''}".strip())


def _discard(line: str) -> None:
    """Trace sink for the CLI; output is rendered from the outcomes instead."""


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            return 1

        if args.command == "chain" and not args.action:
            print("Error: No action specified for chain. Use --help for usage information.")
            return 1

        try:
            config = ConfigurationManager(args.config).app_config
            logging_config = config.logging
            if args.log_level:
                logging_config = logging_config.model_copy(update={"level": args.log_level})
            setup_logging(logging_config)
            service = ApprovalService.from_config(config, sink=_discard)
        except DomainException as e:
            if not args.quiet:
                print(f"Error: {e}")
            return 1

        logger = get_logger(__name__)
        try:
            result = execute_command(args, service)
            print(format_output(result, args.format))
            return 0
        except DomainException as e:
            logger.error("Domain error", error=str(e), error_code=e.error_code)
            if not args.quiet:
                print(f"Error: {e}")
            return 1
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
