"""Small helpers for composing the cross-table listing statements.

Every bind value in a composed statement goes through one ``ParameterBinder``
so placeholders are numbered ``p1, p2, ...`` in the order they were added,
no matter how many per-type subqueries end up in the union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import JSON, Text, bindparam, literal_column
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.elements import BindParameter, ColumnElement
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import TypeEngine


class ParameterBinder:
    """Hands out explicitly indexed bind parameters for one statement."""

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._values: list[Any] = []

    @property
    def next_index(self) -> int:
        return self._start + len(self._values)

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(self._values)

    def bind(self, value: Any, type_: TypeEngine[Any] | None = None) -> BindParameter[Any]:
        param = bindparam(f"p{self.next_index}", value, type_=type_)
        self._values.append(value)
        return param

    def values_from(self, index: int) -> tuple[Any, ...]:
        """Values bound at placeholder ``index`` and after."""
        return tuple(self._values[max(index - self._start, 0):])


@dataclass(frozen=True)
class FilterFragment:
    where_clause: ColumnElement[bool] | None
    bound_values: tuple[Any, ...]
    next_index: int

    @property
    def is_empty(self) -> bool:
        return self.where_clause is None


def sql_string(value: str) -> ColumnElement[str]:
    """Inline a fixed string constant without allocating a placeholder."""
    return literal_column("'%s'" % value.replace("'", "''"), Text)


class json_build_object(FunctionElement[Any]):
    """``jsonb_build_object`` on PostgreSQL, ``json_object`` elsewhere."""

    type = JSON()
    name = "json_build_object"
    inherit_cache = True

    @classmethod
    def from_pairs(cls, **fields: Any) -> json_build_object:
        args: list[Any] = []
        for key, value in fields.items():
            args.extend((sql_string(key), value))
        return cls(*args)


@compiles(json_build_object)
def _compile_json_object(element: json_build_object, compiler: Any, **kw: Any) -> str:
    args = []
    for clause in element.clauses:
        rendered = compiler.process(clause, **kw)
        # JSON columns are stored as text; re-parse so they nest as values
        if isinstance(clause.type, JSON):
            rendered = "json(%s)" % rendered
        args.append(rendered)
    return "json_object(%s)" % ", ".join(args)


@compiles(json_build_object, "postgresql")
def _compile_jsonb_build_object(
    element: json_build_object, compiler: Any, **kw: Any
) -> str:
    return "jsonb_build_object(%s)" % compiler.process(element.clauses, **kw)
