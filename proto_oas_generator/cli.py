#!/usr/bin/env python3
"""Command-line interface for the protobuf naming tools."""

import argparse
import json
import sys
import traceback
from collections.abc import Callable
from pathlib import Path

from proto_oas_generator.generator.spacing import clean_spacing
from proto_oas_generator.generator.template_engine import ProtoTemplateEngine
from proto_oas_generator.naming.endpoint import Endpoint, compile_endpoint_name
from proto_oas_generator.naming.enums import enum_value_name, normalize_enum_name
from proto_oas_generator.utils.file_utils import load_json_context, read_document, write_document
from proto_oas_generator.utils.string_case import package_name, service_name

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_FILE_NOT_FOUND = 1
EXIT_INVALID_JSON = 2
EXIT_GENERATION_ERROR = 3


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="proto-oas-names",
        description="Derive protobuf names from OpenAPI text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s endpoint /pets/{petId} get
  %(prog)s endpoint /pets get --operation-id listPets
  %(prog)s enum "Cats & Dogs" --enum-name Animal
  %(prog)s service "pet store"
  %(prog)s spacing pets.proto --output pets.proto
  %(prog)s render pets.proto.j2 --context pets.json
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    endpoint_parser = subparsers.add_parser("endpoint", help="Derive an RPC method name")
    endpoint_parser.add_argument("path", help="Endpoint path, e.g. /pets/{petId}")
    endpoint_parser.add_argument("verb", help="HTTP method, e.g. get")
    endpoint_parser.add_argument(
        "--operation-id",
        default="",
        help="Explicit operationId, takes precedence over path and verb",
        dest="operation_id",
    )

    enum_parser = subparsers.add_parser("enum", help="Normalize an enum label")
    enum_parser.add_argument("label", help="Raw enum value text")
    enum_parser.add_argument(
        "--enum-name",
        help="Enum type name; prints the prefixed constant name instead",
        dest="enum_name",
    )

    package_parser = subparsers.add_parser("package", help="Derive a package name")
    package_parser.add_argument("text", help="Free-form name, e.g. an API title")

    service_parser = subparsers.add_parser("service", help="Derive a service name")
    service_parser.add_argument("text", help="Free-form name, e.g. an API title")

    spacing_parser = subparsers.add_parser("spacing", help="Normalize blank lines between declarations")
    spacing_parser.add_argument("document", type=Path, help="Protobuf document to clean", metavar="FILE")
    spacing_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output file (default: stdout)",
        dest="output",
    )

    render_parser = subparsers.add_parser("render", help="Render a Jinja2 template with the naming filters")
    render_parser.add_argument("template", type=Path, help="Template file", metavar="TEMPLATE")
    render_parser.add_argument(
        "--context",
        "-c",
        type=Path,
        help="JSON file holding the template context object",
        dest="context_file",
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output file (default: stdout)",
        dest="output",
    )

    return parser.parse_args(args)


def _emit(content: str | bytes, output: Path | None, *, verbose: bool) -> None:
    if output is None:
        if isinstance(content, bytes):
            # documents are passed through in their own encoding
            sys.stdout.flush()
            sys.stdout.buffer.write(content)
            sys.stdout.buffer.flush()
        else:
            print(content, end="")
        return
    write_document(output, content)
    if verbose:
        print(f"Wrote {output}")


def run_endpoint(args: argparse.Namespace) -> None:
    """Print the RPC method name of an endpoint."""
    endpoint = Endpoint(path=args.path, verb=args.verb, operation_id=args.operation_id)
    print(compile_endpoint_name(endpoint))


def run_enum(args: argparse.Namespace) -> None:
    """Print the normalized name of an enum label."""
    if args.enum_name:
        print(enum_value_name(args.enum_name, args.label))
    else:
        print(normalize_enum_name(args.label))


def run_package(args: argparse.Namespace) -> None:
    """Print the package name for free-form text."""
    print(package_name(args.text))


def run_service(args: argparse.Namespace) -> None:
    """Print the service name for free-form text."""
    print(service_name(args.text))


def run_spacing(args: argparse.Namespace) -> None:
    """Normalize the declaration spacing of a document."""
    document = read_document(args.document)
    if args.verbose:
        print(f"Read {len(document)} bytes from {args.document}", file=sys.stderr)
    _emit(clean_spacing(document), args.output, verbose=args.verbose)


def run_render(args: argparse.Namespace) -> None:
    """Render a template with the naming filters."""
    if not args.template.exists():
        raise FileNotFoundError(args.template)
    context = load_json_context(args.context_file) if args.context_file else {}
    if args.verbose:
        print(f"Rendering {args.template} with {len(context)} context keys", file=sys.stderr)

    engine = ProtoTemplateEngine(args.template.parent)
    _emit(engine.render_template(args.template.name, context), args.output, verbose=args.verbose)


COMMANDS: dict[str, Callable[[argparse.Namespace], None]] = {
    "endpoint": run_endpoint,
    "enum": run_enum,
    "package": run_package,
    "service": run_service,
    "spacing": run_spacing,
    "render": run_render,
}


def main(args: list[str] | None = None) -> int:
    """Derive protobuf names from OpenAPI text."""
    parsed_args = parse_command_line_args(args)

    try:
        COMMANDS[parsed_args.command](parsed_args)
        return EXIT_SUCCESS

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename or e}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in context file: {e}", file=sys.stderr)
        return EXIT_INVALID_JSON
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
