# sitereviews/common/strings/splitters.py
from typing import List, Sequence


def csv_to_list(v: str | Sequence[str] | None) -> List[str]:
    """Accept "a, b,c" from env vars or an already-split list; blanks are dropped."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(s).strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]
