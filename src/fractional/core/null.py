from __future__ import annotations
class Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self):
        return False


MISSING = Missing()
