# sitereviews/common/strings/names.py
from __future__ import annotations


def format_name(full_name: str | None) -> str:
    """
    Shorten a reviewer's display name to "First L.".

      "John Smith"       -> "John S."
      "Mary Jane Watson" -> "Mary W."
      "Cher"             -> "Cher"
      ""                 -> ""
    """
    parts = (full_name or "").split()
    if not parts:
        return ""
    if len(parts) < 2:
        return parts[0]
    return f"{parts[0]} {parts[-1][0].upper()}."


def review_count_label(count: int) -> str:
    return f"{count} review" if count == 1 else f"{count} reviews"
