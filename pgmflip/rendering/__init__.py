from .transforms import flip_rows, invert_rows

__all__ = ["flip_rows", "invert_rows"]
