# -*- coding: utf-8 -*-
"""Core module: status catalog, resolver and materializer"""

from .models import Category, StatusRecord, category_for_code
from .catalog import StatusCatalog, HTTP_STATUS_CODES, get_catalog

__all__ = ["Category", "StatusRecord", "category_for_code", "StatusCatalog", "HTTP_STATUS_CODES", "get_catalog"]
