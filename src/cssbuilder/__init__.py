from .errors import DuplicateFragmentError, OrderViolationError, SelectorError, SerializationError
from .rectangle import Rectangle, make_rectangle
from .selector import CompositeSelector, Selector, SelectorBuilder, SimpleSelector, builder
from .serialize import from_json, to_json

__all__ = [
    "CompositeSelector",
    "DuplicateFragmentError",
    "OrderViolationError",
    "Rectangle",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SerializationError",
    "SimpleSelector",
    "builder",
    "from_json",
    "make_rectangle",
    "to_json",
]
