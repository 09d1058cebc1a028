"""SQL statement builder mixins."""

from sqlcompose.builder.mixins._insert_into import InsertIntoClauseMixin
from sqlcompose.builder.mixins._insert_values import InsertFromSelectMixin, InsertValuesMixin
from sqlcompose.builder.mixins._upsert import OnConflictMixin, OnDuplicateKeyUpdateMixin

__all__ = (
    "InsertFromSelectMixin",
    "InsertIntoClauseMixin",
    "InsertValuesMixin",
    "OnConflictMixin",
    "OnDuplicateKeyUpdateMixin",
)
