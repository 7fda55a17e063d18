"""Value formatters for options that need more than a plain prefix.

- border.py: ``bo_`` tokens from border specs or raw strings
- resize.py: the composite crop/width/height token
- flags.py: dot-joined flag lists
"""

from .border import border, border_value
from .flags import flags_value
from .resize import resize

__all__ = ["border", "border_value", "flags_value", "resize"]
