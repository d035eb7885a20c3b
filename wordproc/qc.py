from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List


def build_report(words: List[str], top: int = 20) -> Dict[str, Any]:
    """
    Quick sanity report for a finished list: sizes, most common first/last
    characters and the length distribution.
    """
    nonempty = [w for w in words if w]
    prefix = Counter(w[0] for w in nonempty)
    suffix = Counter(w[-1] for w in nonempty)
    lengths = Counter(len(w) for w in words)

    return {
        "count": len(words),
        "unique": len(set(words)),
        f"top_prefix_{top}": prefix.most_common(top),
        f"top_suffix_{top}": suffix.most_common(top),
        "lengths": sorted(lengths.items()),
    }


def write_report(report: Dict[str, Any], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(report, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
