"""
Dataset validator for wordscramble.

What this module does:
- Validate the pair of word lists the game runs on: start.txt (root words)
  and dictionary.txt (words the word-list checker accepts).
- Enforce formatting rules (lowercase, a–z only, one per line; root words at
  least MIN_WORD_LENGTH long).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that every root word is itself a dictionary word.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/start.txt",
                             "packages/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import MIN_WORD_LENGTH


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # number of VALID words after cleaning
    sha256: str          # empty string if missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_len: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_len` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_len:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(start_path: str, dictionary_path: str) -> Dict:
    """
    Validate the start-word and dictionary lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema). `passed`
        is strict: both lists non-empty, no invalid lines, every root word in
        the dictionary. Duplicates are reported as issues but do not fail.
    """
    issues: List[str] = []

    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    if not start_p.exists() or not dict_p.exists():
        if not start_p.exists():
            issues.append(f"start-word file not found: {start_path}")
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            start=FileReport(start_path, start_p.exists(), 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            start_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    starts, start_invalid = _load_and_check(start_p, MIN_WORD_LENGTH)
    words, dict_invalid = _load_and_check(dict_p, 1)

    start_report = _file_report(start_p, starts, start_invalid)
    dict_report = _file_report(dict_p, words, dict_invalid)

    missing = sorted(set(starts) - set(words))
    subset_ok = not missing
    if not subset_ok:
        issues.append(f"start words missing from dictionary (e.g., {missing[:5]})")

    if start_report.count == 0:
        issues.append("start-word file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if start_invalid:
        issues.append(f"start words has {start_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")

    if start_report.count != start_report.unique_count:
        issues.append("start words contains duplicate lines")
    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate lines")

    passed = (
            subset_ok
            and start_invalid == 0
            and dict_invalid == 0
            and start_report.count > 0
            and dict_report.count > 0
    )

    rep = ValidationReport(
        start=start_report,
        dictionary=dict_report,
        start_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console output.

    Example:
        start=60 (uniq=60, sha=abc123...) | dictionary=900 (uniq=900, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={report['start_subset_dictionary']} | {status}"
    )
