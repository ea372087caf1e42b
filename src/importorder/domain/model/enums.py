"""Domain enumerations."""

from enum import Enum


class ViolationKind(Enum):
    """Import ordering rule that was broken."""

    UNSORTED_BINDING = "unsorted-binding"
    DUPLICATE_MODULE = "duplicate-module"
    EMPTY_IMPORT_OUT_OF_ORDER = "empty-import-out-of-order"
    ABSOLUTE_IMPORT_OUT_OF_ORDER = "absolute-import-out-of-order"
    ALPHABETICAL_OUT_OF_ORDER = "alphabetical-out-of-order"
