#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for linting contract files."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .. import __version__
from ..config import LinterConfig
from ..exceptions import ContractLoadError
from ..models.parsing.yaml_parser import yaml_parser
from . import lint_files, LintResult

logger = logging.getLogger(__name__)

CONTRACT_EXTENSIONS = ['.contract.yaml', '.contract.yml', '.contract.json']


def find_contract_files(paths: List[str]) -> List[Path]:
    """Find contract files in the given paths.

    Files named explicitly are linted whatever their name; directories are
    searched recursively for ``*.contract.{yaml,yml,json}``.
    """
    contract_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if not any(path.name.endswith(ext) for ext in CONTRACT_EXTENSIONS):
                logger.info(f"Linting file without a contract extension: {path}")
            contract_files.append(path)
        elif path.is_dir():
            for ext in CONTRACT_EXTENSIONS:
                contract_files.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(contract_files))


def _print_json(results: List[LintResult]) -> None:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [r.to_dict() for r in results],
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(results: List[LintResult]) -> None:
    for result in results:
        for error in result.errors:
            print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
        for warning in result.warnings:
            print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")


def _print_human(results: List[LintResult]) -> None:
    for result in results:
        if result.errors or result.warnings:
            print(f"\n{result.file_path}:")
            for error in result.errors:
                line_info = f":{error['line']}" if 'line' in error else ""
                print(f"  ERROR{line_info}: {error['message']}")
            for warning in result.warnings:
                line_info = f":{warning['line']}" if 'line' in warning else ""
                print(f"  WARNING{line_info}: {warning['message']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='autobots-contract-lint',
        description='Validate autobots Contract documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Contract files or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Config file (default: ./.autobots.yaml, then $HOME/.autobots.yaml)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    args = build_parser().parse_args(argv)

    try:
        config = LinterConfig.load(args.config)
    except ContractLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    config.set_logging(verbose=args.verbose)
    yaml_parser.cache_enabled = config.cache_enabled

    if not args.paths:
        args.paths = ['.']

    contract_files = find_contract_files(args.paths)

    if not contract_files:
        print("No contract files found.", file=sys.stderr)
        sys.exit(1)

    logger.debug(f"Linting {len(contract_files)} contract file(s)")
    results = lint_files(contract_files)

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:
        _print_human(results)

    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
