"""GET /api/algorithms: library introspection."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from logoforge.engine.library import LibraryEntry, find_entry, get_library
from logoforge.engine.registry import get_registry
from logoforge.models.responses import AlgorithmInfo, AlgorithmsResponse

router = APIRouter(prefix="/algorithms")


def _info(entry: LibraryEntry) -> AlgorithmInfo:
    return AlgorithmInfo(
        name=entry.name,
        description=entry.description,
        base_id=entry.base_id,
        family=get_registry().get(entry.base_id).family.value,
        overrides=dict(entry.overrides),
        kind=entry.kind,
        category=entry.category,
    )


@router.get("", response_model=AlgorithmsResponse)
async def list_algorithms(kind: str | None = None) -> AlgorithmsResponse:
    entries = [e for e in get_library() if kind is None or e.kind == kind]
    return AlgorithmsResponse(algorithms=[_info(e) for e in entries], count=len(entries))


@router.get("/{name}", response_model=AlgorithmInfo)
async def get_algorithm(name: str) -> AlgorithmInfo:
    entry = find_entry(name)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {name}")
    return _info(entry)
