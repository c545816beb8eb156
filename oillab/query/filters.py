"""
Filter primitives for list queries.

``StringFilter`` and ``IdFilter`` describe the allowed operators for one
field. Entity filter schemas subclass ``EntityFilter`` and declare one
optional primitive per filterable field:

```python
class LubricantFilter(EntityFilter):
    brand: StringFilter | None = None
    model: StringFilter | None = None


LubricantFilter(brand={"equals": "Shell"}).conditions()
# [Condition(field="brand", op=FilterOp.EQUALS, value="Shell")]
```

Every operator set on a primitive becomes one ``Condition``; all conditions
of all fields are AND-ed by the storage collaborator.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oillab.exceptions import ValidationError
from oillab.query.spec import Condition, FilterOp


class BaseFilter(BaseModel):  # type: ignore[misc]
    """
    Base class for all filter schemas.

    Unknown keys are rejected so that a typo never silently widens a query.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class StringFilter(BaseFilter):
    """
    Operators for a string column.

    ``contains``, ``startsWith`` and ``endsWith`` are case-insensitive;
    ``equals`` is exact.
    """

    equals: str | None = None
    contains: str | None = None
    starts_with: str | None = Field(default=None, alias="startsWith")
    ends_with: str | None = Field(default=None, alias="endsWith")

    def conditions(self, field: str) -> list[Condition]:
        ops = (
            (FilterOp.EQUALS, self.equals),
            (FilterOp.CONTAINS, self.contains),
            (FilterOp.STARTS_WITH, self.starts_with),
            (FilterOp.ENDS_WITH, self.ends_with),
        )
        return [
            Condition(field=field, op=op, value=value)
            for op, value in ops
            if value is not None
        ]


class IdFilter(BaseFilter):
    """Operators for an integer identifier column."""

    equals: int | None = None
    in_: list[int] | None = Field(default=None, alias="in")

    def conditions(self, field: str) -> list[Condition]:
        """
        Build the conditions for ``field``.

        Raises:
            ValidationError: If ``in`` is an empty list. An empty membership
                test would otherwise match nothing without telling anyone.
        """
        result = []
        if self.equals is not None:
            result.append(
                Condition(field=field, op=FilterOp.EQUALS, value=self.equals)
            )
        if self.in_ is not None:
            if not self.in_:
                raise ValidationError(
                    f"Filter '{field}.in' must contain at least one value",
                    field=f"{field}.in",
                )
            # Duplicates do not change membership
            result.append(
                Condition(
                    field=field,
                    op=FilterOp.IN,
                    value=tuple(dict.fromkeys(self.in_)),
                )
            )
        return result


class EntityFilter(BaseFilter):
    """
    Base class for per-entity filter schemas.

    Subclasses declare ``<field>: StringFilter | IdFilter | None`` attributes
    named after the model attributes they constrain. On the wire the keys
    are camelCase (``formNumber``), in Python snake_case (``form_number``).
    """

    model_config = ConfigDict(alias_generator=to_camel)

    def conditions(self) -> list[Condition]:
        """
        Flatten every field filter into one list of conditions.

        Fields are visited in declaration order, so the result is stable
        for a given filter value.
        """
        result: list[Condition] = []
        for name in type(self).model_fields:
            field_filter = getattr(self, name)
            if field_filter is not None:
                result.extend(field_filter.conditions(name))
        return result
