# -*- coding: utf-8 -*-
"""
Image Resolver - pick one image URL for a status code

Queries are tried in a fixed order and the first one with results wins:
1. the contextual phrase for the code (when the table has one)
2. "rabbit <message>", lower-cased
3. "rabbit"

A failed search counts as a miss for that tier. Without a source (no
credential) the resolver answers NO_CREDENTIAL and issues no request.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from sources.base import BaseImageSource
from sources.contextual_queries import CONTEXTUAL_QUERIES

logger = logging.getLogger(__name__)

GENERIC_QUERY = "rabbit"


class ResolveStatus(Enum):
    FOUND = "found"
    NO_MATCH = "no_match"
    NO_CREDENTIAL = "no_credential"


@dataclass
class ResolveResult:
    """Result of resolving one status code

    Attributes:
        status: outcome
        url: chosen image URL (FOUND only)
        query: the query that produced url
        attempts: queries issued, in order
        errors: number of searches that failed at the service
    """
    status: ResolveStatus
    url: Optional[str] = None
    query: Optional[str] = None
    attempts: List[str] = field(default_factory=list)
    errors: int = 0

    @property
    def found(self) -> bool:
        return self.status == ResolveStatus.FOUND


def build_queries(code: int, message: str, queries: Dict[int, str] = None) -> List[str]:
    """Ordered search queries for one code, duplicates removed"""
    table = CONTEXTUAL_QUERIES if queries is None else queries
    tiers = []
    contextual = table.get(code)
    if contextual:
        tiers.append(contextual)
    tiers.append(f"rabbit {message}".lower())
    tiers.append(GENERIC_QUERY)

    ordered = []
    for q in tiers:
        if q not in ordered:
            ordered.append(q)
    return ordered


class ImageResolver:
    def __init__(self, source: Optional[BaseImageSource], queries: Dict[int, str] = None):
        self.source = source
        self.queries = CONTEXTUAL_QUERIES if queries is None else queries

    @property
    def offline(self) -> bool:
        return self.source is None

    def resolve(self, code: int, message: str) -> ResolveResult:
        if self.source is None:
            return ResolveResult(ResolveStatus.NO_CREDENTIAL)

        result = ResolveResult(ResolveStatus.NO_MATCH)
        for query in build_queries(code, message, self.queries):
            result.attempts.append(query)
            urls = self.source.search(query)
            if urls is None:
                result.errors += 1
                logger.warning("search failed for %s query=%r", code, query)
                continue
            if urls:
                result.status = ResolveStatus.FOUND
                result.url = urls[0]
                result.query = query
                logger.info("%s query=%r results=%d", code, query, len(urls))
                return result
            logger.info("%s no results for %r", code, query)

        logger.warning("no image for %s after %d queries (%d failed)", code, len(result.attempts), result.errors)
        return result
