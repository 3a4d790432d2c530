from supabase import Client
from typing import List, Dict, Any


def replace_all(supabase: Client, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Delete every row of table, then insert rows in the given order. Not transactional."""
    supabase.table(table)\
        .delete()\
        .gte("id", 0)\
        .execute()
    if not rows:
        return []
    result = supabase.table(table)\
        .insert(rows)\
        .execute()
    return result.data or []


def with_order_index(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{**row, "order_index": index} for index, row in enumerate(rows)]
