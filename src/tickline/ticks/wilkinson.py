"""Extended Wilkinson axis labeling.

Searches label sets of the form ``lmin, lmin + step, ..., lmax`` where
``step = j * q * 10**z``: ``q`` is a "nice" number, ``j`` a looseness
multiplier and ``z`` a power-of-ten exponent. Each candidate is scored on
coverage, simplicity, density and legibility (Talbot, Lin & Hanrahan, 2010)
and the best one wins. Upper bounds on each criterion prune whole branches
of the search, which is what keeps it finite; every loop additionally has an
explicit limit (see :class:`LabelSearchConfig`) and the number of scored
candidates is capped by ``max_evaluations``.

Worst-case loop counts, with the initial best score of -2:

* ``j``: the simplicity bound ``0.75 + 0.25 * (2 - j)`` drops below -2 once
  ``j > 13``.
* ``k``: the density bound drops below the best score once
  ``(k - 1) / (m - 1) > 7``, i.e. ``k <= 7 * m - 6``.
* ``z``: the first exponent already yields a span of at least
  ``range * (k - 1) / (k + 1)``; one or two more powers of ten push the
  coverage bound below any accepted score.
* start offsets: at most ``(k + 1) * j`` per ``(j, q, k, z)``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from functools import lru_cache

from tickline.errors import ConfigurationError, InvalidAxisQueryError
from tickline.types.axis import AxisQuery, LabelRange, LabelSet

logger = logging.getLogger(__name__)

# Preference order: earlier entries are simpler.
NICE_NUMBERS: tuple[float, ...] = (1.0, 5.0, 2.0, 2.5, 4.0, 3.0)

# Score every candidate must beat before anything has been accepted.
_INITIAL_SCORE = -2.0

# 10.0 ** z overflows past this
_MAX_EXPONENT = 307

_ARITHMETIC_ERRORS = (OverflowError, ZeroDivisionError, ValueError)


@dataclass(frozen=True, slots=True)
class ScoreWeights:
    """Weights of the four scoring criteria."""

    coverage: float = 0.2
    simplicity: float = 0.25
    density: float = 0.5
    legibility: float = 0.05

    def score(self, coverage: float, simplicity: float, density: float, legibility: float) -> float:
        return (
            self.coverage * coverage
            + self.simplicity * simplicity
            + self.density * density
            + self.legibility * legibility
        )


@dataclass(frozen=True, slots=True)
class LabelSearchConfig:
    """Tuning constants and hard limits for the label search."""

    nice_numbers: tuple[float, ...] = NICE_NUMBERS
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    max_looseness: int = 16
    ticks_per_target: int = 8
    max_exponent_steps: int = 8
    max_evaluations: int = 250_000
    zero_tolerance: float = 1e-10
    fallback_label_count: int = 5

    def __post_init__(self) -> None:
        if self.fallback_label_count < 2:
            raise ConfigurationError(
                "fallback_label_count must be at least 2", key="fallback_label_count"
            )
        if self.max_evaluations < 1:
            raise ConfigurationError("max_evaluations must be at least 1", key="max_evaluations")
        if len(self.nice_numbers) < 2:
            raise ConfigurationError("nice_numbers needs at least two entries", key="nice_numbers")

    def with_budget(self, max_evaluations: int) -> LabelSearchConfig:
        return replace(self, max_evaluations=max_evaluations)


DEFAULT_SEARCH_CONFIG = LabelSearchConfig()


@dataclass(frozen=True, slots=True)
class _Candidate:
    score: float
    lmin: float
    lmax: float
    step: float
    ticks: int
    exponent: int


class _SearchBudgetExceeded(Exception):
    pass


def generate_labels(
    data_min: float,
    data_max: float,
    target_label_count: float,
    inclusion: LabelRange | str = LabelRange.ANY,
    *,
    config: LabelSearchConfig = DEFAULT_SEARCH_CONFIG,
) -> LabelSet:
    """Pick evenly spaced, human-friendly labels for ``data_min..data_max``.

    Args:
        data_min: Lower end of the data range.
        data_max: Upper end of the data range.
        target_label_count: Desired number of labels (at least 1).
        inclusion: Containment policy for the label bounds.
        config: Search constants and limits.

    Returns:
        The best scoring :class:`LabelSet`, or a uniform fallback labeling
        (``fallback=True``) when the search cannot produce one.

    Raises:
        InvalidAxisQueryError: ``data_min > data_max``, a count below 1 or
            a non-finite input.
    """
    try:
        policy = LabelRange(inclusion)
    except ValueError as exc:
        raise InvalidAxisQueryError(f"Unknown inclusion policy: {inclusion!r}") from exc
    query = AxisQuery(float(data_min), float(data_max), float(target_label_count), policy)
    query.validate()
    return _generate(query, config)


@lru_cache(maxsize=256)
def _generate(query: AxisQuery, config: LabelSearchConfig) -> LabelSet:
    dmin, dmax = query.data_min, query.data_max
    if query.is_degenerate:
        dmin, dmax = _widen(dmin)
        if not (math.isfinite(dmin) and math.isfinite(dmax)):
            return LabelSet((query.data_min,), 0.0, fallback=True)

    search = _LabelSearch(dmin, dmax, query.target_label_count, query.inclusion, config)
    try:
        best = search.run()
    except _SearchBudgetExceeded:
        logger.warning(
            "Label search for %r..%r exceeded %d evaluations, using uniform labels",
            dmin,
            dmax,
            config.max_evaluations,
        )
        return _uniform_labels(dmin, dmax, config.fallback_label_count)
    except _ARITHMETIC_ERRORS as exc:
        logger.warning("Label search for %r..%r failed (%s), using uniform labels", dmin, dmax, exc)
        return _uniform_labels(dmin, dmax, config.fallback_label_count)

    if best is None:
        logger.warning(
            "No %s labeling found for %r..%r, using uniform labels", query.inclusion, dmin, dmax
        )
        return _uniform_labels(dmin, dmax, config.fallback_label_count)

    digits = _label_digits(best.exponent)
    values = tuple(round(best.lmin + i * best.step, digits) for i in range(best.ticks))
    if not all(map(math.isfinite, values)) or any(b <= a for a, b in zip(values, values[1:])):
        logger.warning(
            "Labels for %r..%r collapsed at step %r, using uniform labels", dmin, dmax, best.step
        )
        return _uniform_labels(dmin, dmax, config.fallback_label_count)

    logger.debug(
        "Labels %r..%r step %r score %.4f after %d evaluations",
        values[0],
        values[-1],
        best.step,
        best.score,
        search.evaluations,
    )
    return LabelSet(values, round(best.step, digits))


class _LabelSearch:
    """Branch-and-bound search holding the best candidate seen so far."""

    def __init__(
        self,
        dmin: float,
        dmax: float,
        target: float,
        inclusion: LabelRange,
        config: LabelSearchConfig,
    ) -> None:
        self.dmin = dmin
        self.dmax = dmax
        # A single-label target makes the density ratio undefined.
        self.target = max(target, 2.0)
        self.inclusion = inclusion
        self.config = config
        self.max_ticks = int(config.ticks_per_target * self.target) + 2
        self.best: _Candidate | None = None
        self.evaluations = 0

    @property
    def best_score(self) -> float:
        return self.best.score if self.best is not None else _INITIAL_SCORE

    def run(self) -> _Candidate | None:
        weights = self.config.weights
        qlen = len(self.config.nice_numbers)

        for j in range(1, self.config.max_looseness + 1):
            for qpos, q in enumerate(self.config.nice_numbers):
                sm = _simplicity_max(qpos, qlen, j)
                if weights.score(1.0, sm, 1.0, 1.0) < self.best_score:
                    return self.best

                for k in range(2, self.max_ticks + 1):
                    dm = _density_max(k, self.target)
                    if weights.score(1.0, sm, dm, 1.0) < self.best_score:
                        break
                    self._search_exponents(j, qpos, q, k, sm, dm)

        return self.best

    def _search_exponents(self, j: int, qpos: int, q: float, k: int, sm: float, dm: float) -> None:
        weights = self.config.weights
        delta = (self.dmax - self.dmin) / (k + 1) / j / q
        if delta <= 0.0:
            return
        z0 = math.ceil(math.log10(delta))

        for z in range(z0, z0 + self.config.max_exponent_steps):
            if z > _MAX_EXPONENT:
                return
            step = j * q * 10.0**z
            if step <= 0.0:
                continue

            cm = _coverage_max(self.dmin, self.dmax, step * (k - 1))
            if weights.score(cm, sm, dm, 1.0) < self.best_score:
                return

            min_start = math.floor(self.dmax / step) * j - (k - 1) * j
            max_start = math.ceil(self.dmin / step) * j
            if min_start > max_start:
                continue

            for start in range(min_start, max_start + 1):
                self._evaluate(j, qpos, k, z, step, start)

    def _evaluate(self, j: int, qpos: int, k: int, z: int, step: float, start: int) -> None:
        self.evaluations += 1
        if self.evaluations > self.config.max_evaluations:
            raise _SearchBudgetExceeded

        # Bounds as they will be printed, so containment holds for the output.
        digits = _label_digits(z)
        raw_lmin = start * (step / j)
        lmin = round(raw_lmin, digits)
        lmax = round(raw_lmin + (k - 1) * step, digits)
        if not lmax > lmin:
            return

        score = self.config.weights.score(
            _coverage(self.dmin, self.dmax, lmin, lmax),
            _simplicity(
                qpos, len(self.config.nice_numbers), j, lmin, lmax, step, self.config.zero_tolerance
            ),
            _density(k, self.target, self.dmin, self.dmax, lmin, lmax),
            1.0,
        )

        # Strictly greater: ties keep the earlier candidate.
        if score <= self.best_score:
            return
        if not self.inclusion.accepts(self.dmin, self.dmax, lmin, lmax):
            return
        self.best = _Candidate(score, raw_lmin, lmax, step, k, z)


def _widen(value: float) -> tuple[float, float]:
    pad = abs(value) * 0.1 or 1.0
    return value - pad, value + pad


def _label_digits(exponent: int) -> int:
    return max(0, 1 - exponent)


def _uniform_labels(dmin: float, dmax: float, count: int) -> LabelSet:
    # Divide first: dmax - dmin can overflow for finite bounds.
    step = dmax / (count - 1) - dmin / (count - 1)
    values = tuple(dmin + i * step for i in range(count - 1)) + (dmax,)
    if any(b <= a for a, b in zip(values, values[1:])):
        return LabelSet((dmin, dmax), dmax - dmin, fallback=True)
    return LabelSet(values, step, fallback=True)


def _simplicity(
    qpos: int, qlen: int, j: int, lmin: float, lmax: float, step: float, tolerance: float
) -> float:
    remainder = lmin % step
    on_zero = (remainder < tolerance or step - remainder < tolerance) and lmin <= 0.0 <= lmax
    v = 1.0 if on_zero else 0.0
    return 1.0 - qpos / (qlen - 1) + v - j


def _simplicity_max(qpos: int, qlen: int, j: int) -> float:
    return 1.0 - qpos / (qlen - 1) - j + 1.0


def _coverage(dmin: float, dmax: float, lmin: float, lmax: float) -> float:
    return 1.0 - 0.5 * ((dmax - lmax) ** 2 + (dmin - lmin) ** 2) / (0.1 * (dmax - dmin)) ** 2


def _coverage_max(dmin: float, dmax: float, span: float) -> float:
    data_range = dmax - dmin
    if span > data_range:
        half = (span - data_range) / 2.0
        return 1.0 - 0.5 * (2.0 * half**2) / (0.1 * data_range) ** 2
    return 1.0


def _density(k: int, m: float, dmin: float, dmax: float, lmin: float, lmax: float) -> float:
    r = (k - 1) / (lmax - lmin)
    rt = (m - 1) / (max(lmax, dmax) - min(lmin, dmin))
    return 2.0 - max(r / rt, rt / r)


def _density_max(k: int, m: float) -> float:
    if k >= m:
        return 2.0 - (k - 1) / (m - 1)
    return 1.0
