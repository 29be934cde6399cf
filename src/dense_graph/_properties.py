from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from dense_graph._dtypes import DType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._graph.graph_base import GraphBase


class Properties:
    """A payload record attached to a vertex or an edge.

    Attribute values are numpy scalars or arrays with the dtypes declared in
    the owning :class:`PropertySchema`. Reads and writes go through plain
    attribute access::

        props.weight
        props.weight = 2.5
    """

    __slots__ = ("_schema", "_values")

    def __init__(self, schema: PropertySchema, values: dict[str, Any]) -> None:
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_values", values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._schema.dtypes:
            raise AttributeError(name)
        self._values[name] = self._schema.dtypes[name].coerce(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        if self._values.keys() != other._values.keys():
            return False
        return all(
            np.array_equal(value, other._values[name])
            for name, value in self._values.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"Properties({fields})"

    def get(self, name: str) -> Any:
        return self._values[name]

    def copy(self) -> Properties:
        """Return an independent copy (array values are copied too)."""
        dtypes = self._schema.dtypes
        return Properties(
            self._schema,
            {name: dtypes[name].copy_value(value) for name, value in self._values.items()},
        )

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)


class PropertySchema:
    """The payload layout of all vertices (or all edges) of one graph.

    Parameters
    ----------
    attr_dtypes : Mapping[str, str], optional
        Attribute names mapped to dtype strings (see :class:`DType`).
    kind : str
        "Vertex" or "Edge", used in error messages.
    """

    def __init__(self, attr_dtypes: Mapping[str, str] | None, kind: str) -> None:
        attr_dtypes = attr_dtypes or {}
        if not all(str.isidentifier(name) for name in attr_dtypes):
            raise ValueError(f"{kind} attribute names must be valid identifiers")
        self.kind = kind
        self.dtypes = {name: DType(dtype) for name, dtype in attr_dtypes.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.dtypes

    def __bool__(self) -> bool:
        return bool(self.dtypes)

    def make(self, *data: Any, **kwargs: Any) -> Properties | None:
        """Build a payload from positional and keyword attribute values.

        Positional values bind to attribute names in declaration order.
        Attributes not given default to zero. A schema without attributes
        produces no payload (``None``).
        """
        if not self.dtypes:
            if data or kwargs:
                raise TypeError(f"{self.kind} carries no attributes")
            return None

        names = list(self.dtypes)
        if len(data) > len(names):
            raise TypeError(
                f"Got {len(data)} positional {self.kind.lower()} attributes, "
                f"expected at most {len(names)}"
            )
        values = dict(zip(names, data))
        for name, value in kwargs.items():
            if name not in self.dtypes:
                raise TypeError(f"Unknown {self.kind.lower()} attribute {name!r}")
            if name in values:
                raise TypeError(
                    f"{self.kind} attribute {name!r} given by position and keyword"
                )
            values[name] = value

        return Properties(
            self,
            {
                name: dtype.coerce(values[name]) if name in values else dtype.zero()
                for name, dtype in self.dtypes.items()
            },
        )

    def make_many(
        self, num_items: int, *data: Any, **kwargs: Any
    ) -> list[Properties | None]:
        """Build ``num_items`` payloads from per-item attribute arrays."""
        for values in (*data, *kwargs.values()):
            if len(values) != num_items:
                raise ValueError(
                    f"Attribute arrays must have length {num_items}, got {len(values)}"
                )
        return [
            self.make(
                *(values[i] for values in data),
                **{name: values[i] for name, values in kwargs.items()},
            )
            for i in range(num_items)
        ]


def copy_properties(properties: Properties | None) -> Properties | None:
    return None if properties is None else properties.copy()


def is_weighted(graph: GraphBase) -> bool:
    """Whether the edges of ``graph`` carry a ``weight`` attribute."""
    return graph.is_weighted


def has_capacities(graph: GraphBase) -> bool:
    """Whether the edges of ``graph`` carry a ``capacity`` attribute."""
    return graph.has_capacities


def is_directed(graph: GraphBase) -> bool:
    return graph.directed
