"""
Arabic Root Index: Command Line
================================
Loads roots and patterns into their indexes and reports on them.

Usage:
    python main.py [options]

Options:
    --help              Show help
    --roots PATH        Load roots file (one root per line)
    --patterns PATH     Load patterns file (id|structure|description|category)
    --list-roots        List roots in ascending order
    --list-patterns     List patterns
    --find-root L       Look up a root by its three letters
    --find-pattern ID   Look up a pattern by id
    --tree              Print the root tree sideways
    --verbose           Debug logging to stderr

Default:
    Print index statistics. Built-in patterns are used when --patterns
    is not given.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from cli.renderer import Renderer
from repositories.loader import populate_pattern_repository, populate_root_repository
from repositories.pattern_repository import PatternRepository
from repositories.root_repository import RootRepository


def print_help():
    print("""
Arabic Root Index

Usage:
    python main.py [options]

Options:
    --help              Show this help
    --roots PATH        Load roots file (one root per line)
    --patterns PATH     Load patterns file (id|structure|description|category)
    --list-roots        List roots in ascending order
    --list-patterns     List patterns
    --find-root L       Look up a root by its three letters
    --find-pattern ID   Look up a pattern by id
    --tree              Print the root tree sideways
    --verbose           Debug logging to stderr

With no listing/lookup option, index statistics are printed.
""")


def build_repositories(roots_path: Optional[str],
                       patterns_path: Optional[str]) -> Tuple[RootRepository, PatternRepository]:
    """Create both repositories and fill them from files (or defaults)."""
    root_repo = RootRepository()
    pattern_repo = PatternRepository()

    if roots_path:
        populate_root_repository(root_repo, roots_path)
    if patterns_path:
        populate_pattern_repository(pattern_repo, patterns_path)
    else:
        pattern_repo.seed_defaults()

    return root_repo, pattern_repo


def collect_stats(root_repo: RootRepository,
                  pattern_repo: PatternRepository) -> Dict[str, Any]:
    table = pattern_repo.stats()
    return {
        "roots": root_repo.count(),
        "root_tree_height": root_repo.tree_height(),
        "patterns": pattern_repo.count(),
        "pattern_table_capacity": table["capacity"],
        "pattern_table_load_factor": table["load_factor"],
        "pattern_table_used_buckets": table["used_buckets"],
        "pattern_table_longest_chain": table["longest_chain"],
    }


def _parse_args(args: List[str]) -> Dict[str, Any]:
    """Parse argv into an options dict. Unknown options and missing
    option values exit with status 1."""
    opts: Dict[str, Any] = {
        "roots": None, "patterns": None,
        "find_root": None, "find_pattern": None,
        "list_roots": False, "list_patterns": False,
        "tree": False, "verbose": False,
    }
    with_value = {
        "--roots": "roots", "--patterns": "patterns",
        "--find-root": "find_root", "--find-pattern": "find_pattern",
    }
    flags = {
        "--list-roots": "list_roots", "--list-patterns": "list_patterns",
        "--tree": "tree", "--verbose": "verbose",
    }

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in with_value:
            if i + 1 >= len(args):
                print(f"Missing value for {arg}", file=sys.stderr)
                print_help()
                sys.exit(1)
            opts[with_value[arg]] = args[i + 1]
            i += 2
        elif arg in flags:
            opts[flags[arg]] = True
            i += 1
        else:
            print(f"Unknown option: {arg}", file=sys.stderr)
            print_help()
            sys.exit(1)
    return opts


def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch."""
    args = sys.argv[1:] if argv is None else argv

    if "--help" in args or "-h" in args:
        print_help()
        return

    opts = _parse_args(args)
    if opts["verbose"]:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)s %(name)s: %(message)s")

    renderer = Renderer()

    try:
        root_repo, pattern_repo = build_repositories(opts["roots"], opts["patterns"])
    except (OSError, ValueError) as e:
        renderer.render_error(e)
        print("Error loading input files", file=sys.stderr)
        sys.exit(1)

    acted = False

    if opts["find_root"] is not None:
        acted = True
        root = root_repo.find_by_letters(opts["find_root"])
        if root is None:
            renderer.render_message(f"Root not found: {opts['find_root']}")
        else:
            renderer.mode = "vertical"
            renderer.render_roots([root])
            renderer.mode = "table"

    if opts["find_pattern"] is not None:
        acted = True
        pattern = pattern_repo.find_by_id(opts["find_pattern"])
        if pattern is None:
            renderer.render_message(f"Pattern not found: {opts['find_pattern']}")
        else:
            renderer.mode = "vertical"
            renderer.render_patterns([pattern])
            renderer.mode = "table"

    if opts["list_roots"]:
        acted = True
        renderer.render_roots(root_repo.find_all())

    if opts["list_patterns"]:
        acted = True
        renderer.render_patterns(pattern_repo.find_all())

    if opts["tree"]:
        acted = True
        renderer.render_message(root_repo.format_tree())

    if not acted:
        renderer.render_stats(collect_stats(root_repo, pattern_repo))


if __name__ == "__main__":
    main()
