from __future__ import annotations


class NanoDiscError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class DataLoadError(NanoDiscError):
    pass


class StoreError(NanoDiscError):
    pass
