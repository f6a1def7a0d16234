"""Field paths, field sets, their JSON form, managed fields and conflicts."""

__version__ = "0.1.0"