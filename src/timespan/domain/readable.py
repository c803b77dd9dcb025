"""
ReadableDuration — Capability "имеет длину в миллисекундах"

Равенство, хеш и сравнение определены над этой capability, а не над
конкретным классом: любые две реализации с одинаковой длиной равны.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ReadableDuration(Protocol):
    """Точная длительность в миллисекундах (только чтение)."""

    def get_millis(self) -> int:
        """Полная длина длительности в миллисекундах."""
        ...
