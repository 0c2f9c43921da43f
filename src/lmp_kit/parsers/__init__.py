from .extractor import LmpExtractor, extract
from .state_machine import ParserState, RecordStateMachine, iter_records

__all__ = [
    "LmpExtractor",
    "ParserState",
    "RecordStateMachine",
    "extract",
    "iter_records",
]
