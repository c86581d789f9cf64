"""
SQL fragment helpers shared by the repositories.
"""

from typing import Any, Dict, List, Mapping, NamedTuple

from app.core.exceptions import BadRequestError


class PartialUpdate(NamedTuple):
    """SET clause body plus the values its placeholders refer to, in order."""
    assignments: str
    values: List[Any]


def quote_identifier(name: str) -> str:
    """Double-quote a column name, doubling any embedded quotes."""
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    field_name_map: Dict[str, str]
) -> PartialUpdate:
    """
    Convert a partial update into SQL fragments for an UPDATE statement.

    Keys are taken in the mapping's insertion order, which fixes both the
    placeholder numbering and the order of the returned values.

    Example:
        sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        -> PartialUpdate('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Args:
        data_to_update: Field name -> new value. `None` values are kept and
            clear the column.
        field_name_map: Field name -> column name. Fields not listed use
            their own name as the column.

    Returns:
        PartialUpdate with the comma-joined assignments and their values

    Raises:
        BadRequestError: If there is nothing to update
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    cols = [
        f"{quote_identifier(field_name_map.get(key, key))}=${idx}"
        for idx, key in enumerate(keys, start=1)
    ]

    return PartialUpdate(
        assignments=", ".join(cols),
        values=[data_to_update[key] for key in keys],
    )
