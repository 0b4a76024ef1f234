from .reader_interface import IIdentifierSource
from .scripted_reader import ScriptedIdentifierSource, parse_script_entry, pinned_source

__all__ = [
    'IIdentifierSource',
    'ScriptedIdentifierSource',
    'parse_script_entry',
    'pinned_source',
]
