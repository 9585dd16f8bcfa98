# src/workmanager/core/decorators.py
"""
Decorator for simplified Event definition.

Instead of:
    from dataclasses import dataclass
    from workmanager.core import Event

    @dataclass(slots=True)
    class AssignDoctors(Event):
        def execute(self, run): ...

You can write:
    from workmanager.core import event

    @event
    class AssignDoctors:
        def execute(self, run): ...

The decorator handles:
- Making the class a dataclass with slots
- Making it inherit from Event (if not already)
- Auto-registration via __init_subclass__
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def event(
    cls: type[T] | None = None,
    *,
    name: str | None = None,
    **dataclass_kwargs: Any,
) -> type[T] | Callable[[type[T]], type[T]]:
    """Decorator to define an Event with automatic inheritance and dataclass.

    Parameters
    ----------
    cls : type | None
        The class to decorate (provided automatically when used without parens)
    name : str | None
        Optional custom name for the event. If None, uses class name (snake_case).
    **dataclass_kwargs : Any
        Additional keyword arguments to pass to @dataclass.
        By default, slots=True is set.

    Returns
    -------
    type | Callable
        The decorated class or a decorator function

    Examples
    --------
    Simplest usage:
        @event
        class AssignDoctors:
            def execute(self, run: AssignmentRun) -> None:
                ...

    With custom name:
        @event(name="doctors")
        class AssignDoctors:
            def execute(self, run: AssignmentRun) -> None:
                ...
    """
    from workmanager.core.event import Event

    dataclass_kwargs.setdefault("slots", True)

    def decorator(cls: type[T]) -> type[T]:
        if not issubclass(cls, Event):
            # Rebuild on Event alone so slots work (no multiple inheritance)
            namespace = {
                "__module__": cls.__module__,
                "__qualname__": cls.__qualname__,
                "__doc__": cls.__doc__,
                "__annotations__": getattr(cls, "__annotations__", {}),
            }
            for attr_name in dir(cls):
                if not attr_name.startswith("__"):
                    namespace[attr_name] = getattr(cls, attr_name)

            cls = type(cls.__name__, (Event,), namespace)

        # Set before dataclass() so __init_subclass__ sees the custom name
        if name is not None:
            cls.name = name  # type: ignore[attr-defined]

        cls = dataclass(**dataclass_kwargs)(cls)

        return cls

    if cls is None:
        return decorator
    return decorator(cls)
