import weakref
from collections import deque
from datetime import datetime
from typing import Callable, Dict, Optional


class SimpleLogger:
    def __init__(self, name: str):
        self.name = name

    def log(self, message: str):
        print(f"[{self.name}-Info] {message}")

    def warning(self, message: str):
        print(f"[{self.name}-Warning] {message}")

    def error(self, message: str):
        print(f"[{self.name}-Error] {message}")


# Logger for channel system
logger = SimpleLogger(__name__)


class Channel:
    """
    Observer pattern implementation for engine messaging.

    A channel is a named message stream. Anything callable can watch it and
    receives every message sent to it. Channels with nobody watching are
    falsy, so callers can skip building a message nobody will read:

        channel = get_channel("path")
        if channel:
            channel(f"dropped {cmd}")

    Usage:
        channel = Channel("debug", buffer_size=100, timestamp=True)
        channel.watch(print)  # Add watcher
        channel.watch(my_func, weak=True)  # Add weak reference watcher
        channel("Hello world!")  # Send message
    """

    def __init__(
        self,
        name: str,
        buffer_size: int = 0,
        line_end: Optional[str] = None,
        timestamp: bool = False,
    ):
        self.watchers = []
        self.name = name
        self.buffer_size = buffer_size
        self.line_end = line_end
        self.timestamp = timestamp
        self.buffer = None if buffer_size == 0 else deque(maxlen=buffer_size)

    def __repr__(self):
        return f"Channel({repr(self.name)}, buffer_size={str(self.buffer_size)}, line_end={repr(self.line_end)})"

    def __call__(self, message: str, *args, indent: Optional[bool] = False, **kwargs):
        if self.line_end is not None:
            message = message + self.line_end
        if indent:
            message = "    " + message.replace("\n", "\n    ")
        if self.timestamp:
            ts = datetime.now().strftime("[%H:%M:%S] ")
            message = ts + message.replace("\n", f"\n{ts}")
        for w in self.watchers[:]:
            self._call_watcher(w, message)
        if self.buffer is not None:
            self.buffer.append(message)

    def __len__(self):
        return self.buffer_size

    def __iadd__(self, other):
        self.watch(other)
        return self

    def __isub__(self, other):
        self.unwatch(other)
        return self

    def __bool__(self):
        """
        The truthy value of the channel reflects whether a message would be
        sent anywhere, either to a watcher or into the buffer.
        """
        return bool(self.watchers) or self.buffer_size != 0

    def watch(self, monitor_function: Callable, weak: bool = False):
        """
        Add a watcher function to this channel.

        Args:
            monitor_function: The function to call when messages are sent
            weak: If True, use a weak reference to prevent memory leaks
        """
        for q in self.watchers:
            if q is monitor_function:
                return
            if isinstance(q, weakref.ref) and q() is monitor_function:
                return

        if weak:
            try:
                ref = weakref.ref(monitor_function, self._watcher_died)
                self.watchers.append(ref)
            except TypeError:
                # Built-ins and some callables cannot be weakly referenced.
                logger.warning(f"Callable {monitor_function} does not support weak references, using strong reference")
                self.watchers.append(monitor_function)
        else:
            self.watchers.append(monitor_function)

        if self.buffer is not None:
            for line in list(self.buffer):
                monitor_function(line)

    def _call_watcher(self, watcher, message):
        try:
            if isinstance(watcher, weakref.ref):
                watcher_func = watcher()
                if watcher_func is None:
                    self._watcher_died(watcher)
                    return
            else:
                watcher_func = watcher
            watcher_func(message)
        except Exception as e:
            # One broken watcher must not stop the others.
            logger.warning(f"Watcher error in channel '{self.name}': {type(e).__name__}: {e}")

    def _watcher_died(self, ref):
        try:
            self.watchers.remove(ref)
        except ValueError:
            pass

    def unwatch(self, monitor_function: Callable):
        """Remove a watcher function from this channel."""
        removed = False
        for w in self.watchers[:]:
            if w is monitor_function or (isinstance(w, weakref.ref) and w() is monitor_function):
                self.watchers.remove(w)
                removed = True
        if not removed:
            logger.warning(f"Watcher {monitor_function} not found in channel '{self.name}'")


_channels: Dict[str, Channel] = {}


def get_channel(name: str, *args, **kwargs) -> Channel:
    """
    The channel registered under name, created on first request.
    """
    try:
        return _channels[name]
    except KeyError:
        channel = Channel(name, *args, **kwargs)
        _channels[name] = channel
        return channel
