"""Seed generation and deterministic parameter derivation.

``generate_seed`` is the only non-deterministic entry point of the engine
(timestamp + random salt). Everything derived from a seed afterwards is pure:
the same seed always yields the same parameter vector, algorithm index and
quality score.
"""

from __future__ import annotations

import hashlib
import math
import re
import secrets
import time

from logoforge.models.params import ANATOMY_CHOICES, ParameterVector, round_half_up


_HEX_RE = re.compile(r"^[0-9a-fA-F]{4,}$")

# Hex digits consumed per parameter read (one 16-bit chunk).
_CHUNK = 4
_CHUNK_MAX = 0xFFFF


def generate_seed(
    identity: str,
    category: str,
    *,
    timestamp: int | None = None,
    salt: str | None = None,
) -> str:
    """SHA-256 hex digest of ``identity:category:timestamp:salt`` (lowercased)."""
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    if salt is None:
        salt = secrets.token_hex(8)
    payload = f"{identity.lower()}:{category.lower()}:{timestamp}:{salt}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def validate_seed(seed: str) -> str:
    if not _HEX_RE.match(seed):
        raise ValueError(f"Seed must be a hex string of at least {_CHUNK} digits: {seed!r}")
    return seed


def get_param(
    seed: str,
    offset: int,
    lo: float,
    hi: float,
    step: float | None = None,
    integer: bool = False,
) -> float:
    """Read a 16-bit chunk at ``offset`` (wrapping) and rescale it into [lo, hi]."""
    validate_seed(seed)
    span = max(len(seed) - _CHUNK, 1)
    start = (offset * _CHUNK) % span
    normalized = int(seed[start : start + _CHUNK], 16) / _CHUNK_MAX
    result = lo + normalized * (hi - lo)
    if step:
        result = round_half_up(result / step) * step
    if integer:
        return round_half_up(result)
    return round(result, 2)


def _symmetry(seed: str, offset: int) -> str:
    value = get_param(seed, offset, 0, 1)
    if value < 0.33:
        return "bilateral"
    if value < 0.66:
        return "radial"
    return "none"


def _anatomy(seed: str, offset: int) -> list[str]:
    count = int(get_param(seed, offset, 1, 3, 1, integer=True))
    picked: list[str] = []
    for i in range(count):
        part = ANATOMY_CHOICES[int(get_param(seed, offset + i + 1, 0, 3, 1, integer=True))]
        if part not in picked:
            picked.append(part)
    return picked


def derive_params(seed: str) -> ParameterVector:
    """Slice ``seed`` into the 14-field parameter vector."""
    return ParameterVector(
        stroke_width=get_param(seed, 1, 1, 8, 0.5),
        corner_radius=get_param(seed, 2, 0, 50, 1),
        rotation=get_param(seed, 3, 0, 360, 1),
        curve_tension=get_param(seed, 4, 0.1, 1.0, 0.1),
        element_count=get_param(seed, 5, 2, 6, 1, integer=True),
        spacing_ratio=get_param(seed, 6, 0.5, 2.0, 0.1),
        scale_variance=get_param(seed, 7, 0.8, 1.2, 0.1),
        symmetry=_symmetry(seed, 8),
        fill_opacity=get_param(seed, 9, 0.3, 1.0, 0.1),
        gradient_angle=get_param(seed, 10, 0, 360, 15),
        anatomy=_anatomy(seed, 11),
        cutout_position=get_param(seed, 12, 0, 11, 1, integer=True),
        interlock_depth=get_param(seed, 13, 10, 90, 5),
        stroke_taper=get_param(seed, 14, 0, 100, 10),
    )


def select_index(seed: str, length: int) -> int:
    """Library index chosen by the seed's first byte."""
    validate_seed(seed)
    if length <= 0:
        raise ValueError("Cannot select from an empty pool")
    return int(seed[0:2], 16) % length


def seed_score(seed: str, floor: int, span: int) -> int:
    """Heuristic score in [floor, floor + span - 1] from hex digits 2..6."""
    validate_seed(seed)
    return floor + int(seed[2:6], 16) % span


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def string_hash(text: str) -> int:
    """32-bit shift-subtract hash over UTF-16 code units, absolute value.

    Matches ``h = (h << 5) - h + unit`` with signed 32-bit wrap at every step.
    """
    data = text.encode("utf-16-le", errors="surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return abs(h)


def seeded_random(text: str) -> float:
    """Convenience PRNG in [0, 1): fractional part of ``sin(hash) * 10000``.

    Not uniformly distributed. Kept bit-for-bit because callers depend on
    its exact sequence, not on its statistical quality.
    """
    x = math.sin(string_hash(text)) * 10000
    return x - math.floor(x)
