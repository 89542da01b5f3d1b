# solkit/monitoring/decoders.py

from typing import Any, Callable, Dict, Optional

from borsh_construct import CStruct
from construct import Container, ListContainer

from .base import EventConfig
from .logs_event_processor import LogsEventProcessor


def _to_plain(value: Any) -> Any:
    # construct containers carry private bookkeeping keys like "_io"
    if isinstance(value, Container):
        return {k: _to_plain(v) for k, v in value.items() if not str(k).startswith("_")}
    if isinstance(value, ListContainer):
        return [_to_plain(v) for v in value]
    return value


def layout_decoder(layout: CStruct, as_dict: bool = True) -> Callable[[bytes], Any]:
    """
    Wraps a borsh layout as an event decoder.

    The returned callable raises construct's ConstructError on short or
    malformed payloads, which the event extractor treats as a dropped event.
    """
    def decode(data: bytes) -> Any:
        parsed = layout.parse(data)
        return _to_plain(parsed) if as_dict else parsed

    return decode


def borsh_event_config(
    name: str,
    layout: CStruct,
    processor: Optional[LogsEventProcessor] = None,
    as_dict: bool = True,
) -> EventConfig[Dict[str, Any]]:
    """EventConfig for an Anchor event whose payload is a borsh struct."""
    processor = processor or LogsEventProcessor()
    return processor.create_event_config(name, layout_decoder(layout, as_dict=as_dict))
