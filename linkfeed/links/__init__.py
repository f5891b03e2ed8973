"""
Link records and their in-memory store.

Links are kept in process memory only; a fresh store is seeded with three
example links every time an application is built.
"""

from .schemas import Link  # noqa: F401
from .store import LinkStore, SEED_LINKS  # noqa: F401
