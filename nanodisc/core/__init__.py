from .command import DiscCommand, build_command, setup
from .lookup import LookupService
from .resolver import resolve_input
from .store import ReferenceStore
from .text import TextFormatter

__all__ = ["DiscCommand", "LookupService", "ReferenceStore", "TextFormatter", "build_command", "resolve_input", "setup"]
