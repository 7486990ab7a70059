"""Base generator class for all identifier generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from faker import Faker

T = TypeVar("T")


class BaseGenerator(ABC, Generic[T]):
    """Base class for generators of valid identifiers.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility. All randomness is drawn from the Faker
    instance, so two generators with the same seed produce the same
    sequence of identifiers.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``cs_CZ``).
    """

    def __init__(self, seed: int | None = None, locale: str = "cs_CZ") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    @abstractmethod
    def generate(self) -> T:
        """Generate a single valid identifier."""

    def generate_batch(self, count: int) -> Iterator[T]:
        """Generate multiple identifiers.

        Parameters
        ----------
        count : int
            Number of identifiers to generate.

        Yields
        ------
        T
            Generated identifiers.
        """
        for _ in range(count):
            yield self.generate()
