from .normalize import coerce_grid, coerce_labels, coerce_vector

__all__ = ["coerce_grid", "coerce_labels", "coerce_vector"]
