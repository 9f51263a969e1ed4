"""
Command line entry point for the number scanner.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import PacingConfig, PatternConfig, ScannerConfig, load_pattern_config
from .controller import ScanController
from .report import format_report
from .utils import split_list


# Checked in this order, so the last flag given wins
REGION_SHORTHANDS = ['Canada', 'CA', 'NY', 'NYC', 'TX']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='numscan',
        description='Search for special phone numbers by area code and pattern.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  numscan -c 212 415 808 -r Canada -p VIP,platinum
  numscan --code 212,415,808 --region TX --pattern VIP
  numscan --Canada -c 416 604
"""
    )
    parser.add_argument(
        'extra_codes',
        nargs='*',
        metavar='CODE',
        help='Additional area codes'
    )
    parser.add_argument(
        '-c', '--code',
        type=str,
        default='',
        help='Comma or space separated list of area codes (ex. -c 212,415,808)'
    )
    parser.add_argument(
        '-r', '--region',
        type=str,
        default='',
        help='Region filter (ex. -r Canada)'
    )
    parser.add_argument(
        '-p', '--pattern',
        type=str,
        default='',
        help='Pattern type(s) to search (ex. -p VIP,platinum)'
    )
    for region in REGION_SHORTHANDS:
        parser.add_argument(
            f'--{region}',
            dest=f'region_{region.lower()}',
            action='store_true',
            help=f'Shorthand for -r {region}'
        )
    parser.add_argument(
        '--config-dir',
        type=str,
        help='Directory containing patterns.yaml and regions.yaml'
    )
    parser.add_argument(
        '--no-delay',
        action='store_true',
        help='Skip the pauses between codes'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored progress output'
    )
    return parser


def resolve_region(args: argparse.Namespace) -> str:
    region = args.region
    for shorthand in REGION_SHORTHANDS:
        if getattr(args, f'region_{shorthand.lower()}'):
            region = shorthand
    return region


def resolve_codes(args: argparse.Namespace, patterns: PatternConfig) -> List[str]:
    """
    Work out which codes to scan.

    Explicit codes win, then the requested region, then the default region.

    Raises:
        ValueError: If nothing resolves to a code list
    """
    codes = split_list(args.code)
    for arg in args.extra_codes:
        if not arg.startswith('-') and len(arg) <= 5:
            codes.append(arg)

    region = resolve_region(args)
    if region and not codes:
        codes = patterns.region_codes(region) or []

    if not codes:
        codes = patterns.region_codes('default')
        if not codes:
            raise ValueError("no area codes specified and default region not found")

    return codes


def main(argv: Optional[List[str]] = None) -> int:
    env_path = Path.cwd() / '.env'
    if env_path.exists():
        load_dotenv(env_path)

    args = build_parser().parse_intermixed_args(argv)

    try:
        patterns = load_pattern_config(args.config_dir)
        codes = resolve_codes(args, patterns)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = ScannerConfig()
    if args.no_color:
        config.color = False
    if args.no_delay:
        config.pacing = PacingConfig(pre_fetch_delay=0.0, post_update_delay=0.0)

    controller = ScanController(config, patterns)
    try:
        report = controller.run(codes, split_list(args.pattern))
    except KeyboardInterrupt:
        print("\nStopped.", file=sys.stderr)
        return 130

    text = format_report(report.results)
    if text:
        print(text)
    print("")

    if report.failed:
        print(f"Failed area codes ({len(report.failed)}):")
        for result in report.failed:
            print(f"  - {result.code}: {(result.reason or 'unknown error')[:60]}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
