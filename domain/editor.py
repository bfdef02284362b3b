"""
Row collection editor.

Pure functions over RowCollection. Every operation returns a collection and
never mutates its input; rows that are not touched are carried over as the
same objects, so callers can compare states by value or by identity.
"""

from domain.models.entry_rows import EntryKind, RowCollection, blank_row


def new_collection(kind: EntryKind) -> RowCollection:
    """Create the initial state of a form: a single blank row."""
    return RowCollection(kind=kind, rows=(blank_row(kind),))


def reset(collection: RowCollection) -> RowCollection:
    """Return the initial single-blank-row state for the collection's kind."""
    return new_collection(collection.kind)


def append_blank_row(collection: RowCollection) -> RowCollection:
    """Append one blank row of the collection's kind at the end."""
    return collection.model_copy(
        update={"rows": collection.rows + (blank_row(collection.kind),)}
    )


def update_field(
    collection: RowCollection,
    index: int,
    field: str,
    value: str,
) -> RowCollection:
    """
    Replace one field of the row at ``index``.

    An out-of-range index is ignored: a late edit can arrive for a row the
    user has just removed.

    Raises:
        ValueError: If ``field`` is not a field of the row variant
    """
    if not 0 <= index < len(collection.rows):
        return collection

    row = collection.rows[index]
    if field not in type(row).model_fields:
        raise ValueError(f"Unknown field '{field}' for {type(row).__name__}")

    rows = list(collection.rows)
    rows[index] = row.model_copy(update={field: value})
    return collection.model_copy(update={"rows": tuple(rows)})


def remove_row(collection: RowCollection, index: int) -> RowCollection:
    """Remove the row at ``index`` unless it is the only row left."""
    if len(collection.rows) <= 1 or not 0 <= index < len(collection.rows):
        return collection

    rows = collection.rows[:index] + collection.rows[index + 1:]
    return collection.model_copy(update={"rows": rows})
