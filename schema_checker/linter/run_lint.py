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

"""CLI entry point for checking JSON/YAML documents against a schema file."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from ..config import checker_config
from ..parsing.document_loader import DOCUMENT_SUFFIXES
from . import lint_files, LintResult

logger = logging.getLogger(__name__)


def find_data_files(paths: List[str], exclude: Optional[Path] = None) -> List[Path]:
    """Find all JSON/YAML documents in the given paths."""
    data_files = []
    excluded = exclude.resolve() if exclude is not None else None

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.suffix.lower() in DOCUMENT_SUFFIXES:
                data_files.append(path)
            else:
                logger.warning(f"File is not a JSON or YAML document: {path}")
        elif path.is_dir():
            data_files.extend(
                p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES
            )
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted({p for p in data_files if excluded is None or p.resolve() != excluded})


def _print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    line_info = f":{error['line']}" if 'line' in error else ""
                    print(f"  ERROR{line_info}: {error['message']}")
                for warning in result.warnings:
                    line_info = f":{warning['line']}" if 'line' in warning else ""
                    print(f"  WARNING{line_info}: {warning['message']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the lint CLI."""
    parser = argparse.ArgumentParser(
        description='Check JSON/YAML documents against a schema_checker schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='Data files or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--schema',
        required=True,
        help='Schema document (JSON or YAML)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    args = parser.parse_args(argv)

    config = replace(checker_config, log_level='DEBUG') if args.verbose else checker_config
    config.set_logging()

    if not args.paths:
        args.paths = ['.']

    schema_path = Path(args.schema)
    data_files = find_data_files(args.paths, exclude=schema_path)

    if not data_files:
        print("No JSON or YAML documents found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(data_files, schema_path)
    _print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print(f"Checked {len(data_files)} document(s) with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
