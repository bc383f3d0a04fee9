from .header import Header  # noqa: F401
