# services/typing_engine.py
from typing import List

from typedrill.app.state import Letter, LetterState
from typedrill.ui.events import KeyCode, KeyEvent


class TypingEngine:
    """
    Per-letter typing state. `handle_key` is the only mutator.

    Letters before the cursor are always HIT or MISS, letters at or after it
    are always UNTYPED.
    """

    def __init__(self, phrase: str):
        self.phrase = phrase
        self.letters: List[Letter] = [Letter(ch) for ch in phrase]
        self.cursor = 0

    @property
    def at_end(self) -> bool:
        return self.cursor >= len(self.letters)

    def handle_key(self, event: KeyEvent):
        if event.code is KeyCode.BACKSPACE:
            self._backspace()
        elif event.code is KeyCode.CHAR and event.char:
            self._type(event.char)
        self.check_invariant()

    def _backspace(self):
        if self.cursor == 0:
            return
        self.cursor -= 1
        self.letters[self.cursor] = self.letters[self.cursor].reset()

    def _type(self, ch: str):
        if self.at_end:
            return
        current = self.letters[self.cursor]
        if not current.is_untyped:
            return
        if ch == current.char:
            self.letters[self.cursor] = current.hit()
            self.cursor += 1
        elif ch == " ":
            self._jump_to_end()
        elif current.char == " ":
            # a wrong key can't step over a required space
            return
        else:
            self.letters[self.cursor] = current.miss()
            self.cursor += 1

    def _jump_to_end(self):
        """Give up on the current word: miss the rest of it and land past its space."""
        for i in range(max(self.cursor - 1, 0), len(self.letters)):
            letter = self.letters[i]
            if not letter.is_untyped:
                continue
            if letter.char == " ":
                self.letters[i] = letter.hit()
                self.cursor = i + 1
                return
            self.letters[i] = letter.miss()
        self.cursor = len(self.letters)

    def count(self, state: LetterState) -> int:
        return sum(1 for letter in self.letters if letter.state is state)

    def hits(self) -> int:
        return self.count(LetterState.HIT)

    def misses(self) -> int:
        return self.count(LetterState.MISS)

    def check_invariant(self):
        assert 0 <= self.cursor <= len(self.letters), f"cursor {self.cursor} out of range"
        for i, letter in enumerate(self.letters):
            if i < self.cursor:
                assert not letter.is_untyped, f"untyped letter {i} behind cursor {self.cursor}"
            else:
                assert letter.is_untyped, f"typed letter {i} at or past cursor {self.cursor}"
