from .tokenizer import StopToken, split_declaration, split_stop_token, parse_position
from .resolver import parse_stop, parse_stops, fill_positions, resolve_stops

__all__ = [
    "StopToken",
    "split_declaration",
    "split_stop_token",
    "parse_position",
    "parse_stop",
    "parse_stops",
    "fill_positions",
    "resolve_stops",
]
