"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from filterdesk.config import COLOR_ACTIVE, COLOR_TEXT_MUTED
from filterdesk.domain.filters import Filter, FilterLogic


def logic_label(logic) -> str:
    return "すべて一致 (AND)" if logic == FilterLogic.AND else "いずれか一致 (OR)"


def condition_count_text(filter: Filter) -> str:
    return f"条件 {len(filter.conditions)} 件・{logic_label(filter.logic)}"


def active_color(is_active: bool) -> str:
    return COLOR_ACTIVE if is_active else COLOR_TEXT_MUTED


def issue_summary(issue: dict) -> str:
    """"KEY  title" for result rows; falls back to the id when there is no key."""
    key = issue.get("key") or issue.get("id") or "?"
    title = issue.get("title") or issue.get("summary") or ""
    return f"{key}  {title}".rstrip()


def parse_list_value(text: str | None) -> list[str]:
    """Comma/newline separated input to a unique list for IN / NOT IN values."""
    if not text:
        return []
    values: list[str] = []
    seen = set()
    for part in text.replace("\n", ",").split(","):
        name = part.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        values.append(name)
    return values
