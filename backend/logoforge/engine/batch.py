"""Batch engine: many independently seeded candidates from one brand request.

Each candidate gets its own salted seed, derives its parameter vector, picks a
library entry by seed byte from a fixed pool and receives a seed-derived score.
Candidates share no state, so they may be computed on a thread pool; results
always come back in candidate order.
"""

from __future__ import annotations

import logging
import secrets
import time
from concurrent.futures import ThreadPoolExecutor

from logoforge.engine.config import DEFAULT_CONFIG, EngineConfig
from logoforge.engine.library import Archetype, LibraryEntry, candidate_pool
from logoforge.engine.seed import derive_params, generate_seed, seed_score, select_index
from logoforge.models.results import GenerationResult
from logoforge.svg.paint import PaintContext

logger = logging.getLogger(__name__)


def select_entry(seed: str, pool: tuple[LibraryEntry, ...]) -> LibraryEntry:
    return pool[select_index(seed, len(pool))]


def generate_candidate(
    brand_name: str,
    category: str,
    salt: str,
    pool: tuple[LibraryEntry, ...],
    paint: PaintContext,
    config: EngineConfig = DEFAULT_CONFIG,
) -> GenerationResult:
    seed = generate_seed(brand_name + salt, category)
    params = derive_params(seed)
    entry = select_entry(seed, pool)
    return GenerationResult(
        id=seed,
        svg=entry.render(params, brand_name, paint),
        algorithm=entry.name,
        description=entry.description,
        params=params,
        quality_score=seed_score(seed, config.batch_score_floor, config.batch_score_span),
    )


def generate_batch(
    brand_name: str,
    category: str,
    count: int,
    paint: PaintContext,
    *,
    archetype: Archetype = "any",
    vibe: str = "",
    sort_by_quality: bool = False,
    workers: int = 1,
    config: EngineConfig | None = None,
) -> list[GenerationResult]:
    """Generate ``max(count, batch_min_candidates)`` candidates and return ``count`` of them.

    By default the first ``count`` candidates are returned in generation order.
    With ``sort_by_quality`` the candidates are stable-sorted by score
    (highest first) before truncation.
    """
    if count <= 0:
        return []
    config = config or DEFAULT_CONFIG
    start = time.perf_counter()

    pool = candidate_pool(archetype, vibe)
    total = max(count, config.batch_min_candidates)
    # One token per batch keeps salts unique across batches as well as within one.
    token = secrets.token_hex(4)
    salts = [f"batch-{i}-{token}" for i in range(total)]

    def build(salt: str) -> GenerationResult:
        return generate_candidate(brand_name, category, salt, pool, paint, config)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            candidates = list(executor.map(build, salts))
    else:
        candidates = [build(salt) for salt in salts]

    if sort_by_quality:
        candidates.sort(key=lambda r: r.quality_score, reverse=True)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Batch: %d candidates from a pool of %d (archetype=%s, vibe=%s) in %.0fms",
        total,
        len(pool),
        archetype,
        vibe or "none",
        elapsed,
    )
    return candidates[:count]
