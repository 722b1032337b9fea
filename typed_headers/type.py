from typing import Callable, Iterable, List, Tuple

from typing_extensions import Protocol

RawHeaderListType = List[Tuple[bytes, bytes]]
RawHeaderValuesType = Iterable[bytes]
AddNoteMethodType = Callable[..., None]


class HeaderValueSink(Protocol):
    def append(self, value: bytes) -> None: ...
