

class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""
    pass

class ArenaExhausted(TinyLispError, MemoryError):
    """ Raised when the symbol heap and the cell stack would overlap"""

    def __init__(self, hp: int, sp: int):
        super().__init__(f"out of memory: heap offset {hp} exceeds stack offset {sp} (byte {sp << 3})")
        self.hp = hp
        self.sp = sp

class TinyLispSyntaxError(TinyLispError):
    """ Raised when the reader meets malformed input"""

class QuitRequested(TinyLispError):
    """ Raised by the quit primitive to end the read-eval-print loop"""
