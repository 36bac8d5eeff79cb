"""Template binding metadata for presentation views.

A view exposes selected fields to the template renderer through an explicit
binding table. Each binding names the view attribute, the key the renderer
uses to locate the document element, and whether the value is injected as
element text or as a link target.

The table is attached to the view class with the ``template_view`` decorator
and read back with ``get_template_view``. The renderer itself lives outside
this package; it only needs ``TemplateView.resolve``.

Usage:
    @template_view(
        "Summary",
        TemplateBinding(field="name", attribute_id="orgUnitName"),
        TemplateBinding(field="view_href", attribute_id="orgUnitViewHref",
                        attr=AttributeKind.HREF),
    )
    class OrganisationSummaryView: ...

    context = get_template_view(view).resolve(view)
    # {"orgUnitName": "Finance", "orgUnitViewHref": "/organisations/OU-1"}
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

_ATTRIBUTE_NAME = "__template_view__"

ViewT = TypeVar("ViewT", bound=type)


class AttributeKind(str, Enum):
    """How a bound value is injected into the document."""

    VALUE = "value"
    HREF = "href"


@dataclass(frozen=True, slots=True, kw_only=True)
class TemplateBinding:
    """Binding of one view attribute to a template element.

    Attributes:
        field: Attribute name read from the view.
        attribute_id: Binding key the renderer looks up.
        attr: Whether the value is element text or a link target.
        element_id: Optional element identifier, when it differs from
            or accompanies the binding key.
    """

    field: str
    attribute_id: str
    attr: AttributeKind = AttributeKind.VALUE
    element_id: str | None = None

    def __post_init__(self) -> None:
        """Validate binding after initialization.

        Raises:
            ValueError: If field or attribute_id is empty.
        """
        if not self.field:
            raise ValueError("Template binding field cannot be empty")

        if not self.attribute_id:
            raise ValueError("Template binding attribute_id cannot be empty")


@dataclass(frozen=True, slots=True)
class TemplateView:
    """Binding table for one view class.

    Attributes:
        suffix: Suffix appended to the base template name.
        bindings: Bindings in declaration order.
    """

    suffix: str
    bindings: tuple[TemplateBinding, ...] = ()

    def __post_init__(self) -> None:
        """Reject duplicate fields and binding keys.

        Raises:
            ValueError: If a field or binding key appears twice.
        """
        fields = [binding.field for binding in self.bindings]
        if len(set(fields)) != len(fields):
            raise ValueError("Template view bindings must have unique fields")

        keys = [binding.attribute_id for binding in self.bindings]
        if len(set(keys)) != len(keys):
            raise ValueError("Template view bindings must have unique binding keys")

    def view_name(self, base: str) -> str:
        """Return the template name for ``base`` with this view's suffix."""
        return f"{base}{self.suffix}"

    def binding_for(self, field: str) -> TemplateBinding:
        """Look up the binding declared for a view attribute.

        Args:
            field: View attribute name.

        Returns:
            TemplateBinding: The matching binding.

        Raises:
            KeyError: If no binding is declared for ``field``.
        """
        for binding in self.bindings:
            if binding.field == field:
                return binding
        raise KeyError(field)

    def binding_keys(self) -> list[str]:
        """Return binding keys in declaration order."""
        return [binding.attribute_id for binding in self.bindings]

    def resolve(self, view: object) -> dict[str, Any]:
        """Read every bound attribute from ``view``.

        Args:
            view: Instance of the registered view class.

        Returns:
            dict[str, Any]: Binding key to current value, in declaration order.
            Unset values are returned as None.
        """
        return {
            binding.attribute_id: getattr(view, binding.field)
            for binding in self.bindings
        }


def template_view(suffix: str, *bindings: TemplateBinding) -> Callable[[ViewT], ViewT]:
    """Class decorator registering a binding table on a view class.

    Args:
        suffix: Template name suffix (e.g. "Summary").
        *bindings: Bindings in the order the renderer should see them.

    Returns:
        Decorator that attaches the TemplateView and returns the class.
    """
    table = TemplateView(suffix=suffix, bindings=tuple(bindings))

    def decorate(cls: ViewT) -> ViewT:
        setattr(cls, _ATTRIBUTE_NAME, table)
        return cls

    return decorate


def get_template_view(view: object) -> TemplateView:
    """Return the binding table registered for a view class or instance.

    Args:
        view: View class or instance.

    Returns:
        TemplateView: The registered binding table.

    Raises:
        TypeError: If the class was never decorated with ``template_view``.
    """
    cls = view if isinstance(view, type) else type(view)
    table = getattr(cls, _ATTRIBUTE_NAME, None)
    if table is None:
        raise TypeError(f"{cls.__name__} is not a registered template view")
    return table
