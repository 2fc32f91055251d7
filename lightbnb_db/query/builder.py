"""
Parameterized SQL builder.

Clauses are stored as ``(template, values)`` pairs, where every ``{}`` in
the template is a slot for one bound value. Placeholders are only numbered
when the statement is rendered, walking the clauses in the order they
appear in the SQL text, so the Nth placeholder always refers to the Nth
parameter.

Supported placeholder styles:
    - 'dollar' -> $1, $2, ...   (Postgres native / canonical text)
    - 'format' -> %s            (psycopg2)
    - 'qmark'  -> ?             (sqlite3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

PARAMSTYLES = ("dollar", "format", "qmark")


class _ParamSink:
    """
    Collects params and returns the correct placeholder per paramstyle.
    """

    def __init__(self, paramstyle: str = "dollar"):
        if paramstyle not in PARAMSTYLES:
            raise ValueError(
                f"paramstyle must be one of {PARAMSTYLES}, got {paramstyle!r}"
            )
        self.paramstyle = paramstyle
        self.params: List[Any] = []

    def add(self, value: Any) -> str:
        self.params.append(value)
        if self.paramstyle == "dollar":
            return f"${len(self.params)}"
        if self.paramstyle == "format":
            return "%s"
        return "?"


@dataclass(frozen=True)
class BuiltQuery:
    sql: str
    params: List[Any]


@dataclass(frozen=True)
class _Clause:
    template: str
    values: Tuple[Any, ...] = ()

    def __post_init__(self):
        slots = self.template.count("{}")
        if slots != len(self.values):
            raise ValueError(
                f"Clause {self.template!r} has {slots} slots "
                f"but {len(self.values)} values"
            )

    def render(self, sink: _ParamSink) -> str:
        return self.template.format(*(sink.add(v) for v in self.values))


def _check_limit(limit: Any) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"limit must be an integer, got {limit!r}")
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    return limit


class SelectQuery:
    """
    SELECT statement with optional WHERE / HAVING predicates.

    The first predicate of each group is introduced by its keyword
    (WHERE or HAVING); every following one is joined with AND.

        q = SelectQuery(
            "SELECT * FROM properties",
            group_by="properties.id",
            order_by="cost_per_night",
        )
        q.where("owner_id = {}", 3).limit(10)
        q.build("dollar").sql
        # SELECT * FROM properties
        # WHERE owner_id = $1
        # GROUP BY properties.id
        # ORDER BY cost_per_night
        # LIMIT $2;
    """

    def __init__(
        self,
        base: str,
        *,
        group_by: Optional[str] = None,
        order_by: Optional[str] = None,
    ):
        self.base = base.strip()
        self.group_by = group_by
        self.order_by = order_by
        self._where: List[_Clause] = []
        self._having: List[_Clause] = []
        self._limit: Optional[_Clause] = None

    def where(self, template: str, *values: Any) -> "SelectQuery":
        self._where.append(_Clause(template, values))
        return self

    def having(self, template: str, *values: Any) -> "SelectQuery":
        self._having.append(_Clause(template, values))
        return self

    def limit(self, value: int) -> "SelectQuery":
        self._limit = _Clause("LIMIT {}", (_check_limit(value),))
        return self

    def build(self, paramstyle: str = "dollar") -> BuiltQuery:
        sink = _ParamSink(paramstyle)
        lines = [self.base]

        lines.extend(_predicates("WHERE", self._where, sink))
        if self.group_by:
            lines.append(f"GROUP BY {self.group_by}")
        lines.extend(_predicates("HAVING", self._having, sink))
        if self.order_by:
            lines.append(f"ORDER BY {self.order_by}")
        if self._limit is not None:
            lines.append(self._limit.render(sink))

        return BuiltQuery(sql="\n".join(lines) + ";", params=sink.params)


def _predicates(keyword: str, clauses: Sequence[_Clause], sink: _ParamSink) -> List[str]:
    return [
        f"{keyword if i == 0 else 'AND'} {clause.render(sink)}"
        for i, clause in enumerate(clauses)
    ]


def render_statement(
    template: str,
    values: Sequence[Any],
    paramstyle: str = "dollar",
) -> BuiltQuery:
    """
    Render a fixed statement (INSERT, UPDATE, ...) whose ``{}`` slots are
    filled with placeholders for ``values``, in order.
    """
    sink = _ParamSink(paramstyle)
    sql = _Clause(template.strip(), tuple(values)).render(sink)
    return BuiltQuery(sql=sql + ";", params=sink.params)


__all__ = [
    "BuiltQuery",
    "SelectQuery",
    "render_statement",
]
