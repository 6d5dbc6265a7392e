"""Fault injection for the simulated data source."""

import random
from collections.abc import Iterable, Mapping
from typing import Protocol

from fanfetch.config import FetchConfig
from fanfetch.exceptions import ConfigError

STAGE_KINDS = ("profile", "posts", "comments")

DEFAULT_RATES = {"profile": 0.0, "posts": 0.0, "comments": 0.3}


class RandomSource(Protocol):
    """Anything that can produce uniform floats in [0, 1)."""

    def random(self) -> float: ...


def stage_kind(stage: str) -> str:
    """Map a stage tag such as ``comments:2`` to its kind (``comments``)."""
    return stage.split(":", 1)[0]


class FaultInjector:
    """
    Decides whether a given stage call should fail.

    Failure rates are set per stage kind. Individual stage tags can be forced
    to fail or spared regardless of rate. Forcing a tag leaves the rates of
    every other tag untouched, so pinning exact outcomes needs the rates set
    too (e.g. ``rates={"comments": 0.0}, forced={"comments:2"}``).
    """

    def __init__(
        self,
        rates: Mapping[str, float] | None = None,
        rng: RandomSource | None = None,
        seed: int | None = None,
        forced: Iterable[str] = (),
        spared: Iterable[str] = (),
    ):
        """
        Initialize fault injector.

        Args:
            rates: Failure probability per stage kind, merged over the defaults
            rng: Random source, built from ``seed`` if None
            seed: Seed for the default random source
            forced: Stage tags that always fail
            spared: Stage tags that never fail
        """
        merged = dict(DEFAULT_RATES)
        for kind, rate in (rates or {}).items():
            if kind not in STAGE_KINDS:
                raise ConfigError(f"Unknown stage kind: {kind!r}")
            if not 0.0 <= rate <= 1.0:
                raise ConfigError(f"Failure rate for {kind!r} must be within [0, 1], got {rate}")
            merged[kind] = float(rate)

        self.rates = merged
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.forced = frozenset(forced)
        self.spared = frozenset(spared)

    def should_fail(self, stage: str) -> bool:
        """
        Decide the outcome of one call for a stage tag.

        Forced tags win over spared ones. A random draw is only consumed when
        the tag is neither forced nor spared and its rate is above zero.
        """
        if stage in self.forced:
            return True
        if stage in self.spared:
            return False

        rate = self.rates.get(stage_kind(stage), 0.0)
        if rate <= 0.0:
            return False
        if rate >= 1.0:
            return True
        return self.rng.random() < rate

    @classmethod
    def never(cls) -> "FaultInjector":
        """Injector that lets every call succeed."""
        return cls(rates={kind: 0.0 for kind in STAGE_KINDS})

    @classmethod
    def from_config(cls, config: FetchConfig) -> "FaultInjector":
        """Build an injector from configured failure rates and seed."""
        return cls(
            rates={
                "profile": config.profile_failure_rate,
                "posts": config.posts_failure_rate,
                "comments": config.comment_failure_rate,
            },
            seed=config.random_seed,
        )
