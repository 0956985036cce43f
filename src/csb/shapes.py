"""Rectangle value object."""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    """
    A width/height pair with an area.

    Example:
        r = Rectangle(10, 20)
        r.width     # 10
        r.height    # 20
        r.area()    # 200
    """

    width: Number
    height: Number

    def area(self) -> Number:
        return self.width * self.height

    get_area = area
