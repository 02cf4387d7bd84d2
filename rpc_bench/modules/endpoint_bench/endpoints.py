from typing import List, Optional


def parse_endpoints(raw: Optional[str]) -> List[str]:
    """Split a comma-separated endpoint list, keeping order and duplicates."""
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]
