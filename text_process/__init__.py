from .tokenizer import Tokenizer, classify_char, build_stop_words, string_to_tokens
from .header_parser import parse_header
from .message_assembler import assemble, parse_timestamp

__all__ = [
    "Tokenizer", "classify_char", "build_stop_words", "string_to_tokens",
    "parse_header", "assemble", "parse_timestamp"
]
