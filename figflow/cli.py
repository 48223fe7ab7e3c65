"""
Command-line interface for figflow.

Usage:
    figflow ./exports/app.json -o ./build/
    figflow ./exports/app.json -o ./build/ --format markdown
    figflow ./exports/app.json -o ./build/ --format mermaid --selection
    figflow ./exports/app.json --page "Checkout" --list
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from figflow.backend.formats import OutputFormat, render
from figflow.backend.graphviz import GraphvizExporter
from figflow.core.ir import FlowGraph
from figflow.frontend.nodes import DocumentSnapshot
from figflow.frontend.walker import FlowExtractor

EXTENSIONS = {
    "json": ".json",
    "markdown": ".md",
    "mermaid": ".mmd",
    "dot": ".dot",
    "svg": ".svg",
}


def export_flow_graph(graph: FlowGraph, output_path: Path, format: str) -> Path:
    """Export a flow graph to the specified format."""
    if format == "dot":
        content = GraphvizExporter.to_dot(graph)
    elif format == "svg":
        content = GraphvizExporter.to_svg(graph)
    elif format in {fmt.value for fmt in OutputFormat}:
        content = render(graph, format)
    else:
        raise ValueError(f"Unknown format: {format}. Use: {', '.join(EXTENSIONS)}")

    # Sanitize the store key for use as a filename
    safe_name = graph.store_key.lower().replace(" ", "_").replace("/", "_")
    safe_name = "".join(c for c in safe_name if c.isalnum() or c == "_") or "flow"

    output_file = output_path / f"{safe_name}{EXTENSIONS[format]}"
    output_file.write_text(content, encoding="utf-8")

    return output_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="figflow",
        description="Extract prototype flows from a design document export.",
        epilog="Example: figflow ./exports/app.json -o ./build/ -f mermaid"
    )

    parser.add_argument(
        "input",
        type=Path,
        help="JSON export of the design document"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("."),
        help="Output directory (default: current directory)"
    )

    parser.add_argument(
        "-f", "--format",
        choices=list(EXTENSIONS),
        default="json",
        help="Output format (default: json)"
    )

    parser.add_argument(
        "-p", "--page",
        type=str,
        help="Page id or name to extract (default: the document's current page)"
    )

    parser.add_argument(
        "-s", "--selection",
        action="store_true",
        help="Extract only the nodes selected in the export"
    )

    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List screens with interactions without exporting"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    if not args.input.is_file():
        print(f"Error: Not a file: {args.input}", file=sys.stderr)
        return 1

    try:
        source = DocumentSnapshot.from_file(args.input, page=args.page)
    except (OSError, ValueError) as e:
        print(f"Error loading file: {e}", file=sys.stderr)
        return 1

    extractor = FlowExtractor(source)
    graph = extractor.extract_selection() if args.selection else extractor.extract_page()

    if args.list:
        print(f"{graph.document_name} - {graph.page_name}: "
              f"{len(graph.screens)} screens, {len(graph.connections)} connections")
        for screen in graph.interactive_screens():
            print(f"  {screen.id}: \"{screen.name}\" ({len(screen.interactions)} interactions)")
        return 0

    args.output.mkdir(parents=True, exist_ok=True)

    try:
        output_file = export_flow_graph(graph, args.output, args.format)
    except (OSError, RuntimeError) as e:
        print(f"Error exporting {graph.store_key}: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Exported '{graph.store_key}' -> {output_file}")
    else:
        print(f"{output_file}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
