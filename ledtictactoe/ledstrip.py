"""In-memory model of a WS2812 LED strip with a configurable byte layout."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence, Union

_WORD_MASK = 0xFFFFFFFF


class DataByte(IntEnum):
    """Which colour channel a byte slot of the output word carries."""

    NONE = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    WHITE = 4


class DataFormat(IntEnum):
    """Common byte orders of addressable LEDs."""

    RGB = 0
    GRB = 1
    WRGB = 2

    @property
    def layout(self) -> tuple[DataByte, DataByte, DataByte, DataByte]:
        """The four byte slots this format stands for."""
        return _FORMAT_LAYOUTS[self]


_FORMAT_LAYOUTS = {
    DataFormat.RGB: (DataByte.NONE, DataByte.RED, DataByte.GREEN, DataByte.BLUE),
    DataFormat.GRB: (DataByte.NONE, DataByte.GREEN, DataByte.RED, DataByte.BLUE),
    DataFormat.WRGB: (DataByte.WHITE, DataByte.RED, DataByte.GREEN, DataByte.BLUE),
}

_CHANNEL_SHIFT = {
    DataByte.RED: 0,
    DataByte.GREEN: 8,
    DataByte.BLUE: 16,
    DataByte.WHITE: 24,
}


def _channel(value: int, name: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be within 0..255, got {value}")
    return value


def rgb(red: int, green: int, blue: int) -> int:
    """Pack a colour as 0x00BBGGRR."""
    return (
        _channel(blue, "blue") << 16
        | _channel(green, "green") << 8
        | _channel(red, "red")
    )


def rgbw(red: int, green: int, blue: int, white: int) -> int:
    """Pack a colour as 0xWWBBGGRR."""
    return _channel(white, "white") << 24 | rgb(red, green, blue)


Layout = Union[DataFormat, Sequence[DataByte]]


def _resolve_layout(layout: Layout) -> tuple[DataByte, ...]:
    if isinstance(layout, DataFormat):
        return layout.layout
    slots = tuple(DataByte(b) for b in layout)
    if len(slots) == 4:
        return slots
    if len(slots) == 3:
        # A three-slot layout repeats its first slot, as the hardware driver does.
        return (slots[0], slots[0], slots[1], slots[2])
    raise ValueError(f"a layout needs 3 or 4 byte slots, got {len(slots)}")


class LedStrip:
    """A strip of pixels holding words ready to be shifted out."""

    def __init__(
        self,
        length: int,
        layout: Layout = DataFormat.GRB,
        sink: Optional[Callable[[tuple[int, ...]], object]] = None,
    ) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self.length = length
        self.layout = _resolve_layout(layout)
        self.sink = sink
        self._data = [0] * length

    @property
    def bits(self) -> int:
        """Number of data bits sent per pixel."""
        return 24 if self.layout[0] == DataByte.NONE else 32

    def convert(self, color: int) -> int:
        """Reorder a packed 0xWWBBGGRR colour into the strip's output word."""
        result = 0
        for slot in self.layout:
            shift = _CHANNEL_SHIFT.get(slot)
            if shift is not None:
                result |= (color >> shift) & 0xFF
            result = (result << 8) & _WORD_MASK
        return result

    def set_pixel_color(self, index: int, color: int) -> None:
        """Set one pixel; indices outside the strip are ignored."""
        if 0 <= index < self.length:
            self._data[index] = self.convert(color)

    def fill(self, color: int, first: int = 0, count: Optional[int] = None) -> None:
        """Set ``count`` pixels from ``first`` (to the end by default)."""
        if first < 0:
            raise ValueError("first must not be negative")
        if count is None:
            last = self.length
        else:
            if count < 0:
                raise ValueError("count must not be negative")
            last = min(first + count, self.length)
        word = self.convert(color)
        for i in range(first, last):
            self._data[i] = word

    def words(self) -> tuple[int, ...]:
        """The current output words, one per pixel."""
        return tuple(self._data)

    def show(self) -> tuple[int, ...]:
        """Send the current words to the sink and return them."""
        frame = self.words()
        if self.sink is not None:
            self.sink(frame)
        return frame

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterable[int]:
        return iter(self.words())