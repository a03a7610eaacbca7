from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")

_NOT_SET = object()

class LiveData(Generic[T]):
    """Single-value observable.

    Observers are called in registration order with each published value; an
    observer that publishes during a dispatch supersedes the value for the
    observers not yet notified, so all of them end on the latest value. A
    new observer immediately receives the latest value if one was ever set, so
    a consumer re-subscribing after a restart sees the current state again.
    """

    def __init__(self, value: Any = _NOT_SET):
        self._value = value
        self._version = 0
        self._observers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T | None:
        return None if self._value is _NOT_SET else self._value

    def observe(self, observer: Callable[[T], None]) -> Callable[[], None]:
        self._observers.append(observer)
        if self._value is not _NOT_SET:
            observer(self._value)
        return lambda: self.remove_observer(observer)

    def remove_observer(self, observer: Callable[[T], None]):
        if observer in self._observers:
            self._observers.remove(observer)

    def _dispatch(self, value: T):
        self._value = value
        self._version += 1
        version = self._version
        # Copy so an observer may unsubscribe while being notified
        for observer in list(self._observers):
            # An observer published a newer value; that dispatch already reached everyone
            if self._version != version:
                break
            observer(value)


class MutableLiveData(LiveData[T]):
    @LiveData.value.setter
    def value(self, value: T):
        self._dispatch(value)

    def set_value(self, value: T):
        self._dispatch(value)
