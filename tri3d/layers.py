"""Layer membership masks for scene objects."""

from __future__ import annotations

from dataclasses import dataclass

_MASK_ALL = 0xFFFFFFFF


def _bit(channel: int) -> int:
    """The 32-bit mask bit of a channel; channels outside 0..31 select nothing."""
    if 0 <= channel < 32:
        return 1 << channel
    return 0


@dataclass
class Layers:
    """A 32-bit mask of the layers an object belongs to; layer 0 by default."""

    mask: int = 1

    def set(self, channel: int) -> None:
        """Make the channel the only enabled layer."""
        self.mask = _bit(channel)

    def enable(self, channel: int) -> None:
        """Add the channel to the enabled layers."""
        self.mask |= _bit(channel)

    def enable_all(self) -> None:
        """Enable all 32 layers."""
        self.mask = _MASK_ALL

    def toggle(self, channel: int) -> None:
        """Flip the channel's membership."""
        self.mask ^= _bit(channel)

    def disable(self, channel: int) -> None:
        """Remove the channel from the enabled layers."""
        self.mask &= ~_bit(channel) & _MASK_ALL

    def disable_all(self) -> None:
        """Disable every layer."""
        self.mask = 0

    def test(self, layers: Layers) -> bool:
        """Tell whether this and the other mask share at least one layer."""
        return (self.mask & layers.mask) != 0

    def is_enabled(self, channel: int) -> bool:
        """Tell whether the channel is enabled."""
        return (self.mask & _bit(channel)) != 0