"""
Dictionary validator.

What this module does:
- Validate a word file before it is loaded into a WordIndex.
- Enforce formatting rules (letters A-Z only, either case, one per line,
  at most MAX_WORD_LENGTH letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hangman.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .word_index import MAX_WORD_LENGTH


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words (blank lines ignored)
    unique_count: int    # unique valid words, case-insensitive
    invalid_lines: int   # lines with anything but letters A-Z
    too_long: int        # lines longer than max_length
    longest: int         # length of the longest valid word
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, max_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one word per line; blank lines are skipped, not counted
      - must be ASCII letters A-Z (case is normalised to upper)
      - must have 1..max_length letters

    Returns:
      (valid_words, invalid_count, too_long_count)
    """
    valid: List[str] = []
    invalid = 0
    too_long = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if not (w.isascii() and w.isalpha()):
                invalid += 1
            elif len(w) > max_length:
                too_long += 1
            else:
                valid.append(w.upper())

    return valid, invalid, too_long


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, max_length: int = MAX_WORD_LENGTH) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the word file (one word per line).
    max_length : int
        Longest word accepted (defaults to the index bound).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema) with:
          - counts, SHA-256, duplicate/invalid/too-long diagnostics
          - `passed` boolean (strict: non-empty, no invalid or too-long lines)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, 0, 0, 0, 0, 0, "",
                             passed=False, issues=[f"word file not found: {path}"])
        return asdict(rep)

    words, invalid, too_long = _load_and_check(p, max_length)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word file contains 0 valid words")
    if invalid:
        issues.append(f"word file has {invalid} invalid line(s)")
    if too_long:
        issues.append(f"word file has {too_long} line(s) longer than {max_length} letters")
    if len(unique) != len(words):
        issues.append(f"word file contains {len(words) - len(unique)} duplicate line(s)")

    # duplicates are reported only
    passed = bool(words) and invalid == 0 and too_long == 0

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        too_long=too_long,
        longest=max((len(w) for w in words), default=0),
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | words=173529 (uniq=173529, longest=28, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} (uniq={report['unique_count']}, "
        f"longest={report['longest']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} too_long={report['too_long']} | {status}"
    )
