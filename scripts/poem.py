#!/usr/bin/env python3
"""
Graph Poet CLI - Insert bridge words into sentences using a corpus.

Usage:
    python scripts/poem.py "Test the system."
    python scripts/poem.py --corpus data/mugar-omni-theater.txt "Test the system."
    python scripts/poem.py --graph edges --show-graph "Test the system."
    python scripts/poem.py --input "Test the system." --input "BIG Wolf"
    echo "Test the system." | python scripts/poem.py

Graph representations:
    vertices - Per-vertex outgoing edge maps (default)
    edges    - Vertex set plus flat edge list

Environment (.env is loaded if present):
    GRAPHPOET_CORPUS     - Default corpus path
    GRAPHPOET_GRAPH      - Default graph representation
    GRAPHPOET_CHECK_REP  - Set to 0 to skip graph invariant checks
    LOG_LEVEL            - Logging level (default: INFO)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Environment overrides must be in place before config is imported
load_dotenv(project_root / ".env")

from graphpoet.config import (  # noqa: E402
    DEFAULT_CORPUS_PATH,
    DEFAULT_GRAPH_IMPL,
    GRAPH_IMPLEMENTATIONS,
    LOG_LEVEL,
)
from graphpoet.graph import get_graph  # noqa: E402
from graphpoet.poet import CorpusError, GraphPoet  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Insert bridge words into sentences using a word-affinity graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "sentences",
        nargs="*",
        help="Sentences to turn into poems (default: read lines from stdin)",
    )
    parser.add_argument(
        "--input",
        "-i",
        dest="inputs",
        action="append",
        default=[],
        metavar="TEXT",
        help="Sentence to turn into a poem (repeatable, combined with positional sentences)",
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        default=DEFAULT_CORPUS_PATH,
        help=f"Corpus file (default: {DEFAULT_CORPUS_PATH})",
    )
    parser.add_argument(
        "--graph",
        type=str,
        default=DEFAULT_GRAPH_IMPL,
        choices=list(GRAPH_IMPLEMENTATIONS),
        help=f"Graph representation (default: {DEFAULT_GRAPH_IMPL})",
    )
    parser.add_argument(
        "--show-graph",
        action="store_true",
        help="Print the word-affinity graph before the poems",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        poet = GraphPoet.from_file(args.corpus, graph=get_graph(args.graph))
    except CorpusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.show_graph:
        print(poet)
        print()

    sentences = args.inputs + args.sentences
    if not sentences:
        sentences = (line.rstrip("\n") for line in sys.stdin)
    for sentence in sentences:
        print(poet.poem(sentence))

    return 0


if __name__ == "__main__":
    sys.exit(main())
