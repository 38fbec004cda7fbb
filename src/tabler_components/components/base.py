"""Base component and slot declarations.

Every component is a small class whose constructor takes parameters and
whose `call()` method assembles markup. Children are supplied through
*slots* — named, optionally repeated child regions filled by builder
methods before a single `render()` call.

Declaring Slots:
    ```python
    class CardComponent(BaseComponent):
        header = renders_one(HeaderComponent)
        bodies = renders_many(ContentComponent, singular="body")
        footer = renders_one(FooterComponent)

        def call(self) -> Markup:
            return content_tag("div", self.header, self.bodies, self.footer, class_="card")
    ```

Each slot generates a builder method named ``with_<singular>``:

    ```python
    card = CardComponent()
    card.with_header("Title", subtitle="Sub")   # constructs HeaderComponent
    card.with_body().with_content("First")     # returns the child for chaining
    card.with_body(ContentComponent("Second")) # or pass a ready-made child
    html = card.render()
    ```

Slot Semantics:
- `renders_one`: a later fill replaces the earlier child
- `renders_many`: children render in the order they were added
- `required=True`: checked at render time, raises `SlotError`

Reading a slot attribute returns the stored child (or None / a tuple of
children); it never renders anything by itself.

"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any, ClassVar, Generic, TypeVar, overload

from tabler_components.exceptions import ErrorCode, SlotError
from tabler_components.utils.html import Markup, is_present, join_markup

C = TypeVar("C", bound="BaseComponent")


class Slot(Generic[C]):
    """Descriptor declaring a child slot on a component class.

    Attributes:
        component_class: Class instantiated by the builder method
        many: Whether the slot holds a list of children
        required: Whether render() requires at least one child
        singular: Stem used for the builder name (``with_<singular>``)
    """

    __slots__ = ("component_class", "many", "name", "required", "singular")

    def __init__(
        self,
        component_class: type[C],
        *,
        many: bool = False,
        required: bool = False,
        singular: str | None = None,
    ):
        self.component_class = component_class
        self.many = many
        self.required = required
        self.singular = singular
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.singular is None:
            self.singular = name[:-1] if self.many and name.endswith("s") else name

    @property
    def builder_name(self) -> str:
        return f"with_{self.singular}"

    @overload
    def __get__(self, instance: None, owner: type) -> Slot[C]: ...

    @overload
    def __get__(self, instance: BaseComponent, owner: type) -> Any: ...

    def __get__(self, instance: BaseComponent | None, owner: type) -> Any:
        if instance is None:
            return self
        stored = instance._slot_values.get(self.name)
        if self.many:
            return tuple(stored) if stored else ()
        return stored

    def __set__(self, instance: BaseComponent, value: Any) -> None:
        raise AttributeError(
            f"Slot '{self.name}' is filled with {type(instance).__name__}.{self.builder_name}()"
        )

    def build(self, owner: BaseComponent, *args: Any, **kwargs: Any) -> C:
        """Construct (or accept) a child component for this slot."""
        if len(args) == 1 and not kwargs and isinstance(args[0], BaseComponent):
            child = args[0]
            if not isinstance(child, self.component_class):
                raise SlotError(
                    f"{type(owner).__name__}.{self.name} expects "
                    f"{self.component_class.__name__}, got {type(child).__name__}",
                    component=type(owner).__name__,
                    slot=self.name,
                    code=ErrorCode.INVALID_SLOT_VALUE,
                )
            return child
        return self.component_class(*args, **kwargs)

    def store(self, owner: BaseComponent, child: C) -> None:
        if self.many:
            owner._slot_values.setdefault(self.name, []).append(child)
        else:
            owner._slot_values[self.name] = child

    def is_filled(self, owner: BaseComponent) -> bool:
        return bool(owner._slot_values.get(self.name))


def renders_one(component_class: type[C], *, required: bool = False) -> Any:
    """Declare a single-child slot."""
    return Slot(component_class, many=False, required=required)


def renders_many(
    component_class: type[C], *, required: bool = False, singular: str | None = None
) -> Any:
    """Declare a repeated-child slot.

    The builder name drops a trailing ``s`` from the attribute name unless
    `singular` is given (``bodies`` needs ``singular="body"``).
    """
    return Slot(component_class, many=True, required=required, singular=singular)


def _make_builder(slot: Slot[Any]):
    slot_name = slot.name

    def builder(self: BaseComponent, *args: Any, **kwargs: Any) -> Any:
        return self.fill_slot(slot_name, *args, **kwargs)

    builder.__name__ = builder.__qualname__ = slot.builder_name
    builder.__doc__ = f"Fill the '{slot_name}' slot and return the child component."
    builder.__slot_builder__ = True  # type: ignore[attr-defined]
    return builder


class BaseComponent:
    """Base class for all components.

    Subclasses implement `call()` returning Markup. Rendering goes through
    `render()`, which checks required slots first. Components implement
    `__html__`, so a component can be passed anywhere markup is accepted,
    including as content or as a child of `content_tag`.

    Example:
        >>> class Badge(BaseComponent):
        ...     def __init__(self, text):
        ...         super().__init__()
        ...         self.text = text
        ...     def call(self):
        ...         return content_tag("span", self.text, class_="badge")
        >>> Badge("New").render()
        Markup('<span class="badge">New</span>')
    """

    __slot_registry__: ClassVar[dict[str, Slot[Any]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        registry: dict[str, Slot[Any]] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, Slot):
                    registry[attr] = value
        cls.__slot_registry__ = registry

        for name, slot in registry.items():
            if slot.builder_name not in vars(cls) and not _defined_above(cls, slot.builder_name):
                setattr(cls, slot.builder_name, _make_builder(slot))

    def __init__(self) -> None:
        self._slot_values: dict[str, Any] = {}
        self._content: Any = None

    # -- content ------------------------------------------------------------

    def with_content(self, *content: Any) -> BaseComponent:
        """Set free-form content rendered inside the component.

        Several arguments are concatenated in order. Returns self.
        """
        self._content = content[0] if len(content) == 1 else list(content)
        return self

    @property
    def content(self) -> Markup | None:
        """The content as escaped Markup, or None when empty."""
        if not self.has_content:
            return None
        if isinstance(self._content, (list, tuple)):
            return join_markup(self._content)
        return join_markup([self._content])

    @property
    def has_content(self) -> bool:
        if isinstance(self._content, (list, tuple)):
            return any(is_present(c) for c in self._content)
        return is_present(self._content)

    # -- slots --------------------------------------------------------------

    @classmethod
    def slots(cls) -> dict[str, Slot[Any]]:
        """Slot declarations of this component class, by attribute name."""
        return dict(cls.__slot_registry__)

    def _get_slot(self, name: str) -> Slot[Any]:
        registry = type(self).__slot_registry__
        if name in registry:
            return registry[name]
        component = type(self).__name__
        msg = f"{component} has no slot '{name}'"
        matches = get_close_matches(name, list(registry), n=1, cutoff=0.6)
        if matches:
            msg += f". Did you mean '{matches[0]}'?"
        elif registry:
            msg += f". Available: {', '.join(sorted(registry))}"
        raise SlotError(msg, component=component, slot=name)

    def fill_slot(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Fill slot `name` and return the child component.

        Positional and keyword arguments go to the slot's component class,
        unless a single component instance is passed.
        """
        slot = self._get_slot(name)
        child = slot.build(self, *args, **kwargs)
        slot.store(self, child)
        return child

    def slot_filled(self, name: str) -> bool:
        """True when slot `name` has at least one child."""
        return self._get_slot(name).is_filled(self)

    def validate_slots(self) -> None:
        """Raise SlotError for any required slot left empty."""
        for name, slot in type(self).__slot_registry__.items():
            if slot.required and not slot.is_filled(self):
                component = type(self).__name__
                raise SlotError(
                    f"{component} requires slot '{name}'; "
                    f"call {slot.builder_name}() before render()",
                    component=component,
                    slot=name,
                    code=ErrorCode.REQUIRED_SLOT,
                )

    # -- rendering ----------------------------------------------------------

    def call(self) -> Markup:
        """Assemble the component markup. Subclasses override."""
        return self.content or Markup("")

    def render(self) -> Markup:
        """Validate slots and render the component."""
        self.validate_slots()
        return Markup(self.call())

    def __html__(self) -> Markup:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())


def _defined_above(cls: type, attr: str) -> bool:
    """True when a user-written method `attr` exists on a base class."""
    for klass in cls.__mro__[1:]:
        value = vars(klass).get(attr)
        if value is not None and not getattr(value, "__slot_builder__", False):
            return True
    return False
