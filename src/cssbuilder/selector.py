# CSS selector builder for cssbuilder
# Accumulates selector fragments in grammar order and renders them as text

from __future__ import annotations

from .errors import DuplicateFragmentError, OrderViolationError


class Selector:
    """Base class for anything the builder can render."""

    __slots__ = ()

    def stringify(self) -> str:
        raise NotImplementedError


class SimpleSelector(Selector):
    """A single target: element#id.class[attr]:pseudo-class::pseudo-element.

    Fragment methods mutate the selector in place and return it, so calls can
    be chained. Adding a fragment out of grammar order raises
    OrderViolationError; setting element, id or pseudo-element twice raises
    DuplicateFragmentError.
    """

    __slots__ = ("attribute", "classes", "ident", "pseudo_classes", "pseudo_elem", "tag")

    tag: str | None
    ident: str | None
    classes: list[str]
    attribute: str | None
    pseudo_classes: list[str]
    pseudo_elem: str | None

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.tag = None
        self.ident = None
        self.classes = []
        self.attribute = None
        self.pseudo_classes = []
        self.pseudo_elem = None

    def _has(self, kind: str) -> bool:
        if kind == "element":
            return self.tag is not None
        if kind == "id":
            return self.ident is not None
        if kind == "class":
            return bool(self.classes)
        if kind == "attribute":
            return self.attribute is not None
        if kind == "pseudo-class":
            return bool(self.pseudo_classes)
        return self.pseudo_elem is not None

    def _check_order(self, fragment: str, later: tuple[str, ...]) -> None:
        for kind in later:
            if self._has(kind):
                raise OrderViolationError(fragment, kind)

    def element(self, value: str) -> SimpleSelector:
        """Start a new selector carrying the element fragment."""
        if self.tag is not None:
            raise DuplicateFragmentError("element")
        self._check_order("element", ("id",))
        selector = SimpleSelector()
        selector.tag = value
        return selector

    def id(self, value: str) -> SimpleSelector:
        """Set the id fragment, keeping this selector only if it has an element."""
        if self.pseudo_elem is not None:
            raise OrderViolationError("id", "pseudo-element")
        if self.ident is not None:
            raise DuplicateFragmentError("id")
        self._check_order("id", ("class", "pseudo-class"))
        selector = self if self.tag is not None else SimpleSelector()
        selector.ident = value
        return selector

    def class_(self, value: str) -> SimpleSelector:
        self._check_order("class", ("attribute",))
        self.classes.append(value)
        # Appending a class discards pseudo-classes recorded so far
        self.pseudo_classes = []
        return self

    def attr(self, value: str) -> SimpleSelector:
        """Set the attribute fragment to ``[value]``, replacing any earlier one."""
        self._check_order("attribute", ("pseudo-class",))
        self.attribute = f"[{value}]"
        # Setting an attribute discards a pseudo-element recorded so far
        self.pseudo_elem = None
        return self

    def pseudo_class(self, value: str) -> SimpleSelector:
        if self.pseudo_elem is not None:
            # The pseudo-element is dropped even though the call fails
            self.pseudo_elem = None
            raise OrderViolationError("pseudo-class", "pseudo-element")
        self.pseudo_classes.append(f":{value}")
        return self

    def pseudo_element(self, value: str) -> SimpleSelector:
        if self.pseudo_elem is not None:
            raise DuplicateFragmentError("pseudo-element")
        self.pseudo_elem = f"::{value}"
        return self

    def stringify(self) -> str:
        """Render the selector and clear every fragment."""
        parts: list[str] = []
        if self.tag is not None:
            parts.append(self.tag)
        if self.ident is not None:
            parts.append(f"#{self.ident}")
        if self.classes:
            parts.append("." + ".".join(self.classes))
        if self.attribute is not None:
            parts.append(self.attribute)
        parts.extend(self.pseudo_classes)
        if self.pseudo_elem is not None:
            parts.append(self.pseudo_elem)

        self._reset()
        return "".join(parts)

    def __repr__(self) -> str:
        parts = ["SimpleSelector("]
        fields: list[str] = []
        if self.tag is not None:
            fields.append(f"element={self.tag!r}")
        if self.ident is not None:
            fields.append(f"id={self.ident!r}")
        if self.classes:
            fields.append(f"classes={self.classes!r}")
        if self.attribute is not None:
            fields.append(f"attribute={self.attribute!r}")
        if self.pseudo_classes:
            fields.append(f"pseudo_classes={self.pseudo_classes!r}")
        if self.pseudo_elem is not None:
            fields.append(f"pseudo_element={self.pseudo_elem!r}")
        parts.append(", ".join(fields))
        parts.append(")")
        return "".join(parts)


class CompositeSelector(Selector):
    """Two selectors joined by a combinator (' ', '+', '~' or '>')."""

    __slots__ = ("combination", "combinator")

    combinator: str
    combination: str

    def __init__(self, left: Selector, combinator: str, right: Selector) -> None:
        # Children are rendered (and therefore reset) here
        self.combinator = combinator
        self.combination = f"{left.stringify()} {combinator} {right.stringify()}"

    def stringify(self) -> str:
        combination = self.combination
        self.combination = ""
        return combination

    def __repr__(self) -> str:
        return f"CompositeSelector(combinator={self.combinator!r}, combination={self.combination!r})"


class SelectorBuilder:
    """Stateless entry point: every fragment call starts a new selector."""

    __slots__ = ()

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CompositeSelector:
        """
        Join two selectors with a combinator.

        Both selectors are rendered immediately, which resets them. The
        combinator is written between single spaces whatever it is, so the
        descendant combinator renders as three spaces.

        Args:
            left: The selector before the combinator
            combinator: One of ' ', '+', '~', '>'
            right: The selector after the combinator

        Returns:
            A CompositeSelector holding the rendered combination
        """
        return CompositeSelector(left, combinator, right)


# Global builder instance
builder: SelectorBuilder = SelectorBuilder()
