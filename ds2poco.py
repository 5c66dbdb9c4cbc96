#!/usr/bin/env python3
"""
DS2POCO - generate plain C# classes (POCOs) from OData / WCF Data Service metadata.

Reads the $metadata document of a data service and writes one <EntityType>.cs
file per entity type into the output directory.
"""

import argparse
import asyncio
import os
import re
import sys
from typing import List, Optional
from dotenv import load_dotenv

from ds2poco_lib import MetadataSource, process
from ds2poco_lib.constants import DEFAULT_LINE_ENDING, DEFAULT_NAMESPACE

# Load environment variables from .env file
load_dotenv()


def join_usings(values: Optional[List[str]]) -> Optional[str]:
    """Join --using values (each may itself hold ';' or newline separated names) into one newline separated string."""
    if not values:
        return None
    names = []
    for value in values:
        names.extend(part.strip() for part in re.split(r'[;\r\n]', value) if part.strip())
    return "\n".join(names) or None


def print_progress(message: str):
    print(message, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="OData metadata to C# POCO generator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter  # Show defaults in help
    )
    parser.add_argument("--uri", dest="uri_via_flag", help="URL or path of the metadata document (overrides positional argument and DS2POCO_URI env var)")
    parser.add_argument("uri_pos", nargs='?', help="URL or path of the metadata document (alternative to --uri flag or env var)")
    parser.add_argument("-o", "--output", help="Export directory for the generated files (overrides DS2POCO_OUTPUT_DIR env var)")
    parser.add_argument("-n", "--namespace", help=f"Namespace of the generated classes (overrides DS2POCO_NAMESPACE env var, default: {DEFAULT_NAMESPACE})")
    parser.add_argument("-b", "--base-class", help="Base class of the generated classes (overrides DS2POCO_BASE_CLASS env var)")
    parser.add_argument("--using", dest="usings", action="append", help="Extra namespace to import; repeatable, ';' separated lists accepted (overrides DS2POCO_USINGS env var)")
    parser.add_argument("-u", "--user", help="Username for basic authentication (overrides DS2POCO_USER env var)")
    parser.add_argument("-p", "--password", help="Password for basic authentication (overrides DS2POCO_PASSWORD env var)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds for fetching the metadata")
    parser.add_argument("--lf", action="store_true", help="Write files with LF line endings instead of CRLF")
    # Allow --debug as alias for --verbose
    parser.add_argument("-v", "--verbose", "--debug", dest="verbose", action="store_true", help="Enable verbose output to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    # --- Configuration Handling ---
    # Priority: flag > Positional argument > Environment Variable > .env file
    uri = args.uri_via_flag or args.uri_pos or os.getenv("DS2POCO_URI")
    if args.verbose and uri and not (args.uri_via_flag or args.uri_pos):
        print("[VERBOSE] Using DS2POCO_URI from environment.", file=sys.stderr)
    export_directory = args.output or os.getenv("DS2POCO_OUTPUT_DIR")
    primary_namespace = args.namespace or os.getenv("DS2POCO_NAMESPACE") or DEFAULT_NAMESPACE
    base_class_name = args.base_class or os.getenv("DS2POCO_BASE_CLASS") or None
    using_namespaces = join_usings(args.usings) or join_usings([os.getenv("DS2POCO_USINGS", "")])

    if not uri:
        print("ERROR: Metadata URI is required (use --uri, a positional argument or DS2POCO_URI).", file=sys.stderr)
        return 2
    if not export_directory:
        print("ERROR: Export directory is required (use --output or DS2POCO_OUTPUT_DIR).", file=sys.stderr)
        return 2

    user = args.user or os.getenv("DS2POCO_USER")
    password = args.password or os.getenv("DS2POCO_PASSWORD")
    auth = (user, password) if user and password else None
    if user and not password:
        print("WARNING: Username provided without a password, continuing without authentication.", file=sys.stderr)

    source = MetadataSource(auth=auth, timeout=args.timeout, verbose=args.verbose)

    try:
        result = asyncio.run(process(
            uri,
            export_directory,
            primary_namespace=primary_namespace,
            base_class_name=base_class_name,
            using_namespaces=using_namespaces,
            callback=print_progress,
            source=source,
            verbose=args.verbose,
            line_ending="\n" if args.lf else DEFAULT_LINE_ENDING,
        ))
    finally:
        source.close()

    if not result.success:
        print(f"ERROR: {result.error.kind.value}: {result.error.message}", file=sys.stderr)
        return 1
    if args.verbose:
        print(f"[VERBOSE] Generated {len(result.units)} file(s) in {export_directory}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
