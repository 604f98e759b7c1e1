from .normalize import coerce_colors, coerce_value, normalize_markers

__all__ = ["coerce_colors", "coerce_value", "normalize_markers"]
