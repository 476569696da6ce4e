"""
Configuration constants for the Graph Poet project.

All paths, settings, and tunable parameters are defined here.
Overrides are read from environment variables (a .env file is loaded by
the CLI before this module is imported).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphpoet/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains sample corpora)
DATA_DIR = PROJECT_ROOT / "data"

# Corpus used by the CLI when --corpus is not given
DEFAULT_CORPUS_PATH = Path(
    os.environ.get("GRAPHPOET_CORPUS", str(DATA_DIR / "mugar-omni-theater.txt"))
)

# =============================================================================
# Corpus Configuration
# =============================================================================

# Text encoding used to decode corpus files
CORPUS_ENCODING = os.environ.get("GRAPHPOET_CORPUS_ENCODING", "utf-8")

# =============================================================================
# Graph Configuration
# =============================================================================

# Available graph representations (see graphpoet.graph.get_graph)
GRAPH_IMPLEMENTATIONS = ("vertices", "edges")

# Representation returned by graphpoet.graph.empty_graph()
DEFAULT_GRAPH_IMPL = os.environ.get("GRAPHPOET_GRAPH", "vertices")

# Run representation-invariant checks after every graph mutation.
# Checks are assert-based, so `python -O` disables them regardless.
CHECK_REP = os.environ.get("GRAPHPOET_CHECK_REP", "1").lower() not in ("0", "false", "no")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
