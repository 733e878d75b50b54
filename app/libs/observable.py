"""
Change notification for view-model state.

Every assignment of an ``ObservableField`` notifies each subscribed listener
with the field name before the assignment returns. Listeners are plain
callables, so a presentation layer can refresh bound controls and recompute
predicates such as ``can_submit()`` from inside the callback.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")

ChangeListener = Callable[[str], None]
Unsubscribe = Callable[[], None]


class Observable:
    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify_changed(self, field: str) -> None:
        # copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(field)


class ObservableField(Generic[T]):
    """Descriptor storing a value on the instance and notifying on every set."""

    def __init__(
        self,
        default: T,
        converter: Callable[[Any], T] | None = None,
    ) -> None:
        self._default = default
        self._converter = converter
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type) -> "ObservableField[T]": ...

    @overload
    def __get__(self, instance: Observable, owner: type) -> T: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self._default)

    def __set__(self, instance: Observable, value: Any) -> None:
        if self._converter is not None:
            value = self._converter(value)
        instance.__dict__[self.name] = value
        instance.notify_changed(self.name)
