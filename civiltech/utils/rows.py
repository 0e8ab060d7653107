from typing import Any, Dict

from sqlalchemy import inspect


def row_to_dict(obj: Any, **extra: Any) -> Dict[str, Any]:
    """Column values of a mapped instance, plus any joined extras."""
    data = {attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs}
    data.update(extra)
    return data
