# mdtable_core/cell/alignment.py
"""
Alignment - Column alignment declared by a delimiter cell

| Delimiter | Alignment |
|-----------|-----------|
| `---`     | NONE      |
| `:--`     | LEFT      |
| `--:`     | RIGHT     |
| `:-:`     | CENTER    |
"""
from enum import Enum


class Alignment(Enum):
    """Column alignment options."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


__all__ = [
    "Alignment",
]
