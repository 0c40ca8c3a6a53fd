"""
Root / Pattern File Loader
==========================
Reads UTF-8 text files (BOM tolerated) into Root and Pattern records.

Roots file, one root per line:
    # comment
    كتب
    درس

Patterns file, pipe-separated, description and category optional:
    فاعل|فاعل|Active Participle|participle
    مفعول|مفعول

Blank lines and '#' comments are ignored. Malformed lines are skipped and
logged at WARNING; they never abort a load. A missing file raises
FileNotFoundError.
"""

import logging
from typing import List

from models.pattern import DEFAULT_CATEGORY, Pattern
from models.root import ROOT_LENGTH, Root
from repositories.pattern_repository import PatternRepository
from repositories.root_repository import RootRepository

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"


def _content_lines(file_path: str):
    """Yield (line_number, stripped_line) for non-blank, non-comment lines."""
    with open(file_path, "r", encoding="utf-8-sig") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            yield lineno, line


def load_roots(file_path: str) -> List[Root]:
    roots: List[Root] = []
    for lineno, line in _content_lines(file_path):
        if len(line) != ROOT_LENGTH:
            logger.warning("%s:%d: skipping invalid root %r", file_path, lineno, line)
            continue
        roots.append(Root(line))
    logger.debug("Loaded %d roots from %s", len(roots), file_path)
    return roots


def load_patterns(file_path: str) -> List[Pattern]:
    patterns: List[Pattern] = []
    for lineno, line in _content_lines(file_path):
        parts = [p.strip() for p in line.split(FIELD_SEPARATOR)]
        if len(parts) < 2 or not parts[0] or not parts[1]:
            logger.warning("%s:%d: skipping malformed pattern line %r",
                           file_path, lineno, line)
            continue
        description = parts[2] if len(parts) > 2 else ""
        category = parts[3] if len(parts) > 3 and parts[3] else DEFAULT_CATEGORY
        patterns.append(Pattern(parts[0], parts[1], description, category))
    logger.debug("Loaded %d patterns from %s", len(patterns), file_path)
    return patterns


def populate_root_repository(repo: RootRepository, file_path: str) -> int:
    """Save every root in file_path into repo. Returns roots read."""
    roots = load_roots(file_path)
    for root in roots:
        repo.save(root)
    return len(roots)


def populate_pattern_repository(repo: PatternRepository, file_path: str) -> int:
    """Save every pattern in file_path into repo. Returns patterns read."""
    patterns = load_patterns(file_path)
    for pattern in patterns:
        repo.save(pattern)
    return len(patterns)
