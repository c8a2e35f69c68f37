"""Exception hierarchy for lineage-bench.

Two failure kinds reach callers of the seeder and sampler:

* :class:`InvalidSpecificationError` -- a workload specification outside the
  recognised set.  Raised before the store is touched.
* :class:`StoreError` -- anything the metadata store reports.  The seeder and
  sampler never catch these; they propagate to the workload runner as-is.
"""

from __future__ import annotations


class LineageBenchError(Exception):
    """Base class for all lineage-bench failures."""


class InvalidSpecificationError(LineageBenchError, ValueError):
    """A workload config names a specification this operation does not handle."""


class StoreError(LineageBenchError):
    """The metadata store rejected a request or failed to serve it."""


class DuplicateNameError(StoreError):
    """A type or node name collides with an existing record."""


class UnknownTypeError(StoreError):
    """A node references a type id that does not exist for its family."""


class FamilyMismatchError(StoreError):
    """A record was submitted under a family it does not belong to."""
