"""Metadata store capability.

The seeder and sampler depend on this protocol only, never on a concrete
store.  Implementations must satisfy the following contract:

* ``insert_*`` is all-or-nothing and returns assigned ids in request order.
* ``list_*`` returns every record of the family, ordered by ascending id,
  reflecting the store's state at call time.
* Every failure is raised as a :class:`~lineage_bench.errors.StoreError`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from lineage_bench.errors import FamilyMismatchError
from lineage_bench.models.metadata import NodeFamily, NodeRecord, TypeRecord


@runtime_checkable
class MetadataStore(Protocol):
    """Batched create and full-scan read access to types and nodes."""

    async def insert_types(self, family: NodeFamily, records: Sequence[TypeRecord]) -> list[int]:
        """Insert *records* as types of *family* and return their ids.

        Raises:
            DuplicateNameError: If a name is already taken within the family.
            FamilyMismatchError: If a record does not belong to *family*.
            StoreError: On any other backend failure.
        """
        ...

    async def insert_nodes(self, family: NodeFamily, records: Sequence[NodeRecord]) -> list[int]:
        """Insert *records* as nodes of *family* and return their ids.

        Raises:
            UnknownTypeError: If a record's ``type_id`` is missing or does not
                name an existing type of *family*.
            DuplicateNameError: If a name is already taken under the same type.
            FamilyMismatchError: If a record does not belong to *family*.
            StoreError: On any other backend failure.
        """
        ...

    async def list_types(self, family: NodeFamily) -> list[TypeRecord]:
        """Return all types of *family*."""
        ...

    async def list_nodes(self, family: NodeFamily) -> list[NodeRecord]:
        """Return all nodes of *family*."""
        ...


def check_family(family: NodeFamily, records: Sequence[TypeRecord] | Sequence[NodeRecord]) -> None:
    """Reject a batch containing records of another family."""
    for record in records:
        if record.family != family:
            raise FamilyMismatchError(
                f"{type(record).__name__} {record.name!r} belongs to {record.family.value}, "
                f"not {family.value}"
            )
