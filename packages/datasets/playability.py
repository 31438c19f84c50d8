"""
Playability of root words against a dictionary.

A root word is only fun if the dictionary holds enough words spellable from
it. `playable_words` lists the words the validator would accept on a fresh
game; `playability_report` runs that over a whole start-word list and
summarizes the counts so thin roots can be pruned from start.txt.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np
from tqdm import tqdm

from packages.engine import MIN_WORD_LENGTH, is_spellable

# Roots with fewer playable words than this are flagged in the report.
DEFAULT_MIN_PLAYABLE = 10


def playable_words(root: str, dictionary: Iterable[str]) -> List[str]:
    """
    Dictionary words accepted on an empty game for `root`, sorted by
    (length desc, word) so the best-scoring words come first.
    """
    root = root.strip().lower()
    out = {
        w for w in (d.strip().lower() for d in dictionary)
        if len(w) >= MIN_WORD_LENGTH and w != root and is_spellable(w, root)
    }
    return sorted(out, key=lambda w: (-len(w), w))


def playability_report(
        roots: Iterable[str],
        dictionary: Iterable[str],
        *,
        min_playable: int = DEFAULT_MIN_PLAYABLE,
        progress: bool = False,
) -> Dict:
    """
    Count playable words for each root.

    Returns a JSON-serializable dict:
      counts  : {root: number of playable words}
      summary : min / median / mean / max over the counts (empty if no roots)
      thin    : roots with fewer than `min_playable` playable words
    """
    # Length filter once up front; roots only ever use short dictionary words.
    words = [w for w in (d.strip().lower() for d in dictionary) if len(w) >= MIN_WORD_LENGTH]
    roots = list(dict.fromkeys(r.strip().lower() for r in roots if r.strip()))

    iterator = tqdm(roots, ncols=80, desc="Roots", unit="root") if progress else roots

    counts: Dict[str, int] = {}
    for root in iterator:
        candidates = [w for w in words if len(w) <= len(root)]
        counts[root] = len(playable_words(root, candidates))

    summary: Dict[str, float] = {}
    if counts:
        arr = np.fromiter(counts.values(), dtype=np.int64, count=len(counts))
        summary = {
            "min": int(arr.min()),
            "median": float(np.median(arr)),
            "mean": round(float(arr.mean()), 3),
            "max": int(arr.max()),
        }

    thin = sorted(r for r, c in counts.items() if c < min_playable)
    return {"counts": counts, "summary": summary, "thin": thin, "min_playable": min_playable}
