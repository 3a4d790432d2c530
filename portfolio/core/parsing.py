import json
from typing import Any, List, Optional


def parse_string_list(value: Any, split_commas: bool = False, default: Optional[List[str]] = None) -> List[str]:
    """
    Read a jsonb list column that older rows may hold as a JSON string or a
    plain string. A non-JSON string becomes a one element list, or is split on
    commas when split_commas is set.
    """
    if value is None or value == "":
        return list(default) if default is not None else []
    if isinstance(value, list):
        return [str(v) for v in value]
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return [str(v) for v in parsed]
        if split_commas:
            return [s.strip() for s in value.split(",") if s.strip()]
        return [value]
    return list(default) if default is not None else []
