from typing import Optional


def link_to(slug: str, prefix: str = "") -> str:
    """Resolve a slug to a navigable href under the deployment path prefix."""
    return f"{prefix}{slug}"


def format_tag_line(tags: Optional[str], date: Optional[str]) -> str:
    # "tags |" is kept literally; no separator when there are no tags
    tag_segment = f"{tags} |" if tags else ""
    return " ".join(part for part in (tag_segment, date or "") if part)


def prune_text(text: str, length: int) -> str:
    text = " ".join(text.split())
    if len(text) <= length:
        return text
    cut = text[:length]
    if " " in cut and not text[length].isspace():
        cut = cut.rsplit(" ", 1)[0]
    return f"{cut.rstrip()}…"
