"""
Sort directive sets.

Each entity exposes an enum whose members name one ``(field, direction)``
pair, e.g. ``LubricantSort.MODEL_ASC == "model_ASC"``. The enum and its
lookup table are generated from the list of sortable fields so the two
cannot drift apart.
"""

import re
from enum import Enum
from typing import Iterable, Mapping

from oillab.exceptions import ValidationError
from oillab.query.spec import OrderTerm, SortDirection

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _member_name(wire_name: str, direction: SortDirection) -> str:
    return f"{_CAMEL_BOUNDARY.sub('_', wire_name).upper()}_{direction.value}"


class SortDirectiveSet:
    """
    Enum-to-ordering lookup table for one entity.

    Args:
        name: Name of the generated enum (shown in the OpenAPI schema).
        fields: Sortable fields as ``{wire_name: model_attribute}``. The wire
            name is used in enum values (``formNumber_DESC``), the attribute
            in the produced ``OrderTerm``.

    Example:
        ```python
        lubricant_sort = SortDirectiveSet(
            "LubricantSort", {"model": "model", "brand": "brand"}
        )
        LubricantSort = lubricant_sort.enum
        lubricant_sort.resolve([LubricantSort.BRAND_ASC, "model_DESC"])
        # (OrderTerm(field="brand", ASC), OrderTerm(field="model", DESC))
        ```
    """

    def __init__(self, name: str, fields: Mapping[str, str]):
        self.name = name
        self.table: dict[str, tuple[str, SortDirection]] = {}
        members: list[tuple[str, str]] = []
        for wire_name, attribute in fields.items():
            for direction in SortDirection:
                value = f"{wire_name}_{direction.value}"
                members.append((_member_name(wire_name, direction), value))
                self.table[value] = (attribute, direction)
        self.enum: type[Enum] = Enum(name, members, type=str)  # type: ignore[misc]

    def resolve(self, directives: Iterable[Enum | str]) -> tuple[OrderTerm, ...]:
        """
        Translate directives into ordering terms.

        Sequence order is priority order. A directive naming a field that an
        earlier directive already sorts on is ignored.

        Args:
            directives: Enum members or their raw string values.

        Returns:
            Ordering terms in priority order.

        Raises:
            ValidationError: If a directive is not part of this set.
        """
        ordering: list[OrderTerm] = []
        seen: set[str] = set()
        for directive in directives:
            value = directive.value if isinstance(directive, Enum) else directive
            try:
                field, direction = self.table[value]
            except (KeyError, TypeError):
                raise ValidationError(
                    f"Unknown sort directive '{value}' for {self.name}",
                    field="sort",
                ) from None
            if field in seen:
                continue
            seen.add(field)
            ordering.append(OrderTerm(field=field, direction=direction))
        return tuple(ordering)
