"""Command-line interface for deckedit.

This module exposes the slide serializer and the style parser on the command
line, mostly for inspecting stored decks and debugging markup.

Examples
--------
Serialize a stored slide to JSON:
    $ deckedit slide slide.json

Rebuild the markup of a slide:
    $ deckedit slide slide.json --format html

Show a fragment as a tree:
    $ echo '<div><b>Hi</b> there</div>' | deckedit fragment - --rich

Parse a style declaration:
    $ deckedit style "color: red; font-weight:bold"
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/deckedit/cli.py
import argparse
import json
import logging
import sys
from typing import Any, Optional

from deckedit import __version__
from deckedit.ast import ElementNode, SerializedNode, TextNode, ast_to_json
from deckedit.constants import DEFAULT_HTML_PARSER, DEPS_RICH, HTML_PARSERS
from deckedit.exceptions import DependencyError, ParsingError, ValidationError
from deckedit.logging_utils import configure_logging
from deckedit.options import FragmentOptions, SlideOptions
from deckedit.parsers import Slide, parse_slide, parse_style_declarations, serialize_fragment
from deckedit.renderers import render_html
from deckedit.utils.decorators import check_dependencies

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_UNKNOWN_TEMPLATE = 7


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Enable timestamps and logger names in log output")


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        dest="output_format",
        default="json",
        choices=["json", "html"],
        help="Output format (default: json)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--rich", action="store_true", help="Show the serialized tree with rich formatting")
    parser.add_argument(
        "--html-parser",
        default=DEFAULT_HTML_PARSER,
        choices=list(HTML_PARSERS),
        help=f"{FragmentOptions.field_help()['html_parser']} (default: {DEFAULT_HTML_PARSER})",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its ``slide``, ``fragment`` and ``style`` commands."""
    parser = argparse.ArgumentParser(
        prog="deckedit",
        description="Serialize slide markup into typed node trees.",
    )
    parser.add_argument("--version", action="version", version=f"deckedit {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    slide_parser = subparsers.add_parser("slide", help="Serialize a stored slide (JSON)")
    slide_parser.add_argument("input", help='Slide JSON file, or "-" for stdin')
    _add_output_arguments(slide_parser)
    _add_logging_arguments(slide_parser)

    fragment_parser = subparsers.add_parser("fragment", help="Serialize a markup fragment")
    fragment_parser.add_argument("input", help='Markup file, or "-" for stdin')
    _add_output_arguments(fragment_parser)
    _add_logging_arguments(fragment_parser)

    style_parser = subparsers.add_parser("style", help="Parse an inline style declaration")
    style_parser.add_argument("declaration", help='Declaration string, e.g. "color: red; font-weight: bold"')
    _add_logging_arguments(style_parser)

    return parser


def read_input(source: str) -> str:
    """Read a file path, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def load_slide(text: str) -> Slide:
    """Parse the stored JSON form of a slide.

    Raises
    ------
    ParsingError
        If the text is not a JSON object

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid slide JSON: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError(f"Slide JSON must be an object, got {type(data).__name__}", parsing_stage="json")

    return Slide.from_dict(data)


def build_rich_tree(nodes: SerializedNode | list[SerializedNode], label: str) -> Any:
    """Build a ``rich`` tree view of serialized nodes."""
    from rich.markup import escape
    from rich.tree import Tree

    tree = Tree(f"[bold]{escape(label)}[/bold]")

    def add(branch: Any, node: SerializedNode) -> None:
        if isinstance(node, TextNode):
            branch.add(f"[green]{escape(repr(node.content))}[/green]")
            return

        details = " ".join(f"{key}={value!r}" for key, value in node.attributes.items())
        if node.style:
            details += f" style={dict(node.style)!r}"
        child_branch = branch.add(f"[cyan]<{node.tag}>[/cyan] {escape(details)}".rstrip())
        for child in node.children:
            add(child_branch, child)

    for node in nodes if isinstance(nodes, list) else [nodes]:
        add(tree, node)
    return tree


def _output_tree(parsed: argparse.Namespace, nodes: ElementNode | list[SerializedNode], label: str) -> None:
    if parsed.rich:
        check_dependencies("rich output", DEPS_RICH)
        from rich.console import Console

        Console().print(build_rich_tree(nodes, label))
    elif parsed.output_format == "html":
        print(render_html(nodes))
    else:
        print(ast_to_json(nodes, indent=parsed.indent))


def handle_slide_command(parsed: argparse.Namespace) -> int:
    """Serialize a stored slide and print it."""
    options = SlideOptions(html_parser=parsed.html_parser)
    slide = load_slide(read_input(parsed.input))

    element = parse_slide(slide, options)
    if element is None:
        print(f"Error: Unknown slide template: {slide.template!r}", file=sys.stderr)
        return EXIT_UNKNOWN_TEMPLATE

    _output_tree(parsed, element, slide.id or element.tag)
    return EXIT_SUCCESS


def handle_fragment_command(parsed: argparse.Namespace) -> int:
    """Serialize a markup fragment and print it."""
    options = FragmentOptions(html_parser=parsed.html_parser)
    nodes = serialize_fragment(read_input(parsed.input), options)
    _output_tree(parsed, nodes, "fragment")
    return EXIT_SUCCESS


def handle_style_command(parsed: argparse.Namespace) -> int:
    """Parse a style declaration and print it as JSON."""
    print(json.dumps(parse_style_declarations(parsed.declaration), indent=2))
    return EXIT_SUCCESS


_COMMAND_HANDLERS = {
    "slide": handle_slide_command,
    "fragment": handle_fragment_command,
    "style": handle_style_command,
}


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI and return its exit code."""
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits on --help, --version and usage errors
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    try:
        return _COMMAND_HANDLERS[parsed.command](parsed)
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except (ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except OSError as e:
        print(f"Error reading {getattr(parsed, 'input', '')}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ParsingError as e:
        logger.debug("Parsing failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR


if __name__ == "__main__":
    sys.exit(main())
