# -*- coding: utf-8 -*-
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, Optional


class Category(str, Enum):
    """Status code class"""
    INFORMATIONAL = "Informational"   # 1xx
    SUCCESS = "Success"               # 2xx
    REDIRECTION = "Redirection"       # 3xx
    CLIENT_ERROR = "Client Error"     # 4xx
    SERVER_ERROR = "Server Error"     # 5xx


_RANGE_CATEGORIES = {
    1: Category.INFORMATIONAL,
    2: Category.SUCCESS,
    3: Category.REDIRECTION,
    4: Category.CLIENT_ERROR,
    5: Category.SERVER_ERROR,
}


def category_for_code(code: int) -> Optional[Category]:
    """Category implied by the numeric range, None outside 100..599."""
    return _RANGE_CATEGORIES.get(code // 100)


@dataclass(frozen=True)
class StatusRecord:
    code: int
    message: str
    category: Category
    official: bool = True
    description: str = ""

    def display_label(self) -> str:
        return f"{self.code} {self.message}".strip()

    def image_filename(self) -> str:
        return f"{self.code}.jpg"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['category'] = self.category.value
        return data
