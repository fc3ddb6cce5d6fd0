from dataclasses import dataclass
from typing import Dict, Any, Optional

from .utils import needs_swap


@dataclass
class BufferConfig:
    """
    Construction settings for a ByteBuffer.
    All fields are mandatory so a config always describes one buffer completely.
    """

    # Initial size of the zero-filled storage, in bytes.
    # A growable buffer starting at 0 jumps straight to the first write's size.
    capacity: int

    # Whether writes past the end reallocate (doubling) instead of failing.
    # Fixed for the lifetime of the buffer.
    growable: bool

    # Reverse the byte order of every multi-byte primitive.
    # Producer and consumer of a stream must agree on this flag.
    swap_endian: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BufferConfig":
        """
        Create a config object from a dictionary.
        Raises ValueError if required fields are missing or the capacity is negative.
        """
        known_fields = cls.__annotations__.keys()

        missing = [key for key in known_fields if key not in data]
        if missing:
            raise ValueError(
                f"Invalid Buffer Configuration. Missing required fields: {missing}"
            )

        filtered_data = {k: v for k, v in data.items() if k in known_fields}
        capacity = filtered_data["capacity"]
        if capacity < 0:
            raise ValueError(
                f"Invalid Buffer Configuration. Capacity must be >= 0, got {capacity}"
            )
        return cls(**filtered_data)


# Named presets
# The endian presets describe the wire layout; the swap flag is resolved against the host.
DEFAULTS: Dict[str, Dict[str, Any]] = {
    "fixed": {
        "capacity": 64,
        "growable": False,
        "swap_endian": False,  # native order
    },
    "growable": {
        "capacity": 64,
        "growable": True,
        "swap_endian": False,  # native order
    },
    "little-endian": {
        "capacity": 64,
        "growable": True,
        "swap_endian": needs_swap("little"),
    },
    "big-endian": {
        "capacity": 64,
        "growable": True,
        "swap_endian": needs_swap("big"),  # network order
    },
}


def get_buffer_config(
    name: str, custom_config: Optional[Dict[str, Any]] = None
) -> BufferConfig:
    """
    Retrieve a buffer configuration by preset name.

    Args:
        name: The preset name (e.g., 'growable', 'big-endian').
        custom_config: A dictionary of overrides. If provided, these values
                       will replace the preset's.

    Returns:
        A BufferConfig object.

    Raises:
        ValueError: If the preset is unknown and no valid custom config is provided,
                    or if the resulting configuration is missing required fields.
    """
    if name in DEFAULTS:
        base_data = DEFAULTS[name].copy()
    elif custom_config:
        # Unknown preset: custom_config has to supply every field
        base_data = {}
    else:
        raise ValueError(f"Unknown buffer preset '{name}' and no custom config provided.")

    if custom_config:
        base_data.update(custom_config)

    return BufferConfig.from_dict(base_data)
