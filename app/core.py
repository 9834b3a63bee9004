import re
from typing import Any, Dict, List, Optional, Sequence

# Search, filtering and pagination over product records.

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Lenient integer parse: "3" -> 3, "2abc" -> 2, "1.5" -> 1, "abc" -> None."""
    if value is None:
        return None
    m = _LEADING_INT.match(str(value))
    if not m:
        return None
    return int(m.group(1))


def _positive_or(value: Optional[str], default: int) -> int:
    n = parse_int(value)
    if n is None or n < 1:
        return default
    return n


def query_products(
    products: Sequence[Dict[str, Any]],
    search: Optional[str] = None,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> List[Dict[str, Any]]:
    result = list(products)

    if search:
        term = search.lower()
        result = [
            p for p in result
            if term in p["name"].lower() or term in p["description"].lower()
        ]

    if category:
        cat = category.lower()
        result = [p for p in result if p["category"].lower() == cat]

    page_n = _positive_or(page, 1)
    limit_n = _positive_or(limit, len(result))
    start = (page_n - 1) * limit_n
    return result[start:start + limit_n]


def compute_stats(products: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    categories: Dict[str, int] = {}
    for p in products:
        cat = p["category"].lower()
        categories[cat] = categories.get(cat, 0) + 1
    return {"totalProducts": len(products), "categories": categories}
