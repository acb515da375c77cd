"""
Nested resource composition module

Builds composite documents (a parent row plus its child collection) from
separate backend reads, and provides the existence check used before
dependent writes. Neither step is transactional: a parent removed between the
check and the write is not detected here.

@version 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from .supabase_client import SupabaseClient
from ..utils.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


def fetch_one(
    client: SupabaseClient,
    table: str,
    record_id: Any,
    not_found_message: str,
    columns: str = "*",
) -> Dict[str, Any]:
    """
    Look a row up by id. Exactly one row must come back.

    @param client backend client
    @param table table name
    @param record_id primary key value
    @param not_found_message error message when the row is missing
    @param columns select list
    @returns Dict the row
    """
    try:
        rows = client.select(table, columns=columns, filters={"id": record_id})
    except UpstreamError as e:
        # a malformed id is rejected by the backend; treat it as a missing row
        logger.warning(f"Lookup of {table}.id={record_id} failed: {e.message}")
        raise NotFoundError(not_found_message) from e

    if len(rows) != 1:
        raise NotFoundError(not_found_message)
    return rows[0]


def fetch_with_children(
    client: SupabaseClient,
    parent_table: str,
    parent_id: Any,
    child_table: str,
    foreign_key: str,
    children_key: str,
    not_found_message: str,
    child_columns: str = "*",
    order_by: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Fetch a parent row and its children and merge them into one document.

    The parent is read first; when it is missing the children are never
    fetched. Children are filtered by foreign_key, sorted ascending on
    order_by when given, and may embed deeper descendants through
    child_columns. Any upstream error discards the partial result.

    @param client backend client
    @param parent_table parent table name
    @param parent_id parent primary key value
    @param child_table child table name
    @param foreign_key child column referencing the parent
    @param children_key key holding the children in the result
    @param not_found_message error message when the parent is missing
    @param child_columns select list for the children
    @param order_by child column to sort ascending on
    @returns Dict parent attributes plus children_key
    """
    parent = fetch_one(client, parent_table, parent_id, not_found_message)

    children = client.select(
        child_table,
        columns=child_columns,
        filters={foreign_key: parent_id},
        order=order_by,
        ascending=True,
    )

    return {**parent, children_key: children}
