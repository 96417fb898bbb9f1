from __future__ import annotations


class Rectangle:
    __slots__ = ("width", "height")

    width: float
    height: float

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"


def make_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width, height)
