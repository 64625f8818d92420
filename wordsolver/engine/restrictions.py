"""
Restriction engine: accumulated knowledge about the objective word.

Feedback from every guess is folded into a WordRestrictions object, which
tracks, per letter:
  - letters known to be absent from the word
  - for letters known to be present: how many times they occur (a lower
    bound, or an exact count once known) and, per position, whether the
    letter is known to be Here, NotHere, or still Unknown

Knowledge only ever grows. Each position state moves at most once, from
Unknown to Here or NotHere; asserting the opposite state afterwards raises
ConflictingRestrictionError. Counting rules fill in positions automatically
when the count pins them down (e.g. a letter that must occur once, with every
position but one ruled out, must be in that last position).
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, List, Optional, Set

from wordsolver.errors import ConflictingRestrictionError, LengthMismatchError
from .scoring import GuessResult, LetterResult


class LocatedLetterState(Enum):
    """Whether one present letter is at one position."""
    UNKNOWN = "unknown"
    HERE = "here"
    NOT_HERE = "not here"


class LetterRestriction(Enum):
    """What is known about a letter at a position (read-only view)."""
    UNKNOWN = "unknown"
    HERE = "here"
    PRESENT_MAYBE_HERE = "present maybe here"
    PRESENT_NOT_HERE = "present not here"
    NOT_PRESENT = "not present"


_UNKNOWN = LocatedLetterState.UNKNOWN
_HERE = LocatedLetterState.HERE
_NOT_HERE = LocatedLetterState.NOT_HERE


class PresentLetter:
    """
    Knowledge about one letter that is known to be in the word.

    Invariant: num_here <= min_count <= required_count (when known)
               <= word_length - num_not_here
    """

    __slots__ = ("required_count", "min_count", "num_here", "num_not_here", "located_state")

    def __init__(self, word_length: int):
        self.required_count: Optional[int] = None
        self.min_count = 1
        self.num_here = 0
        self.num_not_here = 0
        self.located_state: List[LocatedLetterState] = [_UNKNOWN] * word_length

    def copy(self) -> "PresentLetter":
        other = PresentLetter(0)
        other.required_count = self.required_count
        other.min_count = self.min_count
        other.num_here = self.num_here
        other.num_not_here = self.num_not_here
        other.located_state = list(self.located_state)
        return other

    def state(self, index: int) -> LocatedLetterState:
        return self.located_state[index]

    @property
    def max_possible_here(self) -> int:
        return len(self.located_state) - self.num_not_here

    def mark_here(self, index: int) -> None:
        """
        Record that the letter is at `index`.

        If the exact count is now met, every other unknown position becomes
        NotHere.
        """
        previous = self.located_state[index]
        if previous is _HERE:
            return
        if previous is _NOT_HERE:
            raise ConflictingRestrictionError(
                f"Can't set letter to {_HERE.value} at index {index} "
                f"since it's already marked as {previous.value}."
            )
        self.located_state[index] = _HERE
        self.num_here += 1
        if self.num_here > self.min_count:
            self.min_count = self.num_here

        if self.required_count is not None:
            # Forced Here positions were filled when the count became exact.
            if self.num_here == self.required_count:
                self._set_unknowns_to(_NOT_HERE)
        else:
            # No unknowns are left to fill in this case.
            self._set_required_count_if_full()

    def mark_not_here(self, index: int) -> None:
        """
        Record that the letter is not at `index`.

        If only `min_count` positions remain possible, they must all hold the
        letter, and the count becomes exact.
        """
        previous = self.located_state[index]
        if previous is _NOT_HERE:
            return
        if previous is _HERE:
            raise ConflictingRestrictionError(
                f"Can't set letter to {_NOT_HERE.value} at index {index} "
                f"since it's already marked as {previous.value}."
            )
        if self.max_possible_here - 1 < self.min_count:
            raise ConflictingRestrictionError(
                f"Can't set letter to {_NOT_HERE.value} at index {index} since it must "
                f"appear {self.min_count} time(s) and only {self.max_possible_here - 1} "
                f"location(s) would remain."
            )
        self.located_state[index] = _NOT_HERE
        self.num_not_here += 1
        if self.max_possible_here == self.min_count:
            self.required_count = self.min_count
            if self.num_here < self.min_count:
                self._set_unknowns_to(_HERE)

    def set_required_count(self, count: int) -> None:
        """Record that the letter occurs exactly `count` times."""
        if self.required_count is not None:
            if self.required_count != count:
                raise ConflictingRestrictionError(
                    f"Can't set required count to {count} since it's already {self.required_count}."
                )
            return
        if count < self.min_count:
            raise ConflictingRestrictionError(
                f"Can't set required count to {count} since that would be less than "
                f"the minimum count ({self.min_count})."
            )
        max_possible = self.max_possible_here
        if max_possible < count:
            raise ConflictingRestrictionError(
                f"Can't set required count to {count} since there aren't enough "
                f"possible spaces (only {max_possible})."
            )
        self.min_count = count
        self.required_count = count
        if self.num_here == count:
            self._set_unknowns_to(_NOT_HERE)
        elif max_possible == count:
            self._set_unknowns_to(_HERE)

    def bump_min_count(self, count: int) -> None:
        """Raise the lower bound on occurrences to `count`, if that is higher."""
        if count <= self.min_count:
            return
        max_possible = self.max_possible_here
        if max_possible < count:
            raise ConflictingRestrictionError(
                f"Can't set min count to {count} when there are only "
                f"{max_possible} possible locations."
            )
        if self.required_count is not None and count > self.required_count:
            raise ConflictingRestrictionError(
                f"Can't set min count to {count} since the letter is known to "
                f"appear exactly {self.required_count} time(s)."
            )
        self.min_count = count
        if max_possible == count:
            self.required_count = count
            if self.num_here < count:
                self._set_unknowns_to(_HERE)

    def merge(self, other: "PresentLetter") -> None:
        """Fold another, independently derived, view of the same letter into this one."""
        if len(other.located_state) != len(self.located_state):
            raise LengthMismatchError(
                f"Can't merge letter information for different word lengths "
                f"(has: {len(self.located_state)}, received: {len(other.located_state)})."
            )
        if other.required_count is not None:
            self.set_required_count(other.required_count)
        elif other.min_count > self.min_count:
            self.bump_min_count(other.min_count)

        for i, state in enumerate(other.located_state):
            if self.located_state[i] is state:
                continue
            if state is _HERE:
                self.mark_here(i)
            elif state is _NOT_HERE:
                self.mark_not_here(i)

    def _set_unknowns_to(self, new_state: LocatedLetterState) -> None:
        for i, state in enumerate(self.located_state):
            if state is _UNKNOWN:
                self.located_state[i] = new_state
                if new_state is _HERE:
                    self.num_here += 1
                else:
                    self.num_not_here += 1
        if new_state is _HERE and self.num_here > self.min_count:
            self.min_count = self.num_here

    def _set_required_count_if_full(self) -> None:
        if self.num_here + self.num_not_here == len(self.located_state):
            self.required_count = self.num_here

    def __repr__(self) -> str:
        states = "".join(
            "H" if s is _HERE else "x" if s is _NOT_HERE else "." for s in self.located_state
        )
        return (f"PresentLetter(min={self.min_count}, required={self.required_count}, "
                f"states={states!r})")


class WordRestrictions:
    """
    Letter restrictions that the objective is known to satisfy, such as
    "the first letter is 'a'" or "there is exactly one 'e'".

    Restrictions are derived from GuessResults via update().
    """

    def __init__(self, word_length: int):
        self.word_length = int(word_length)
        self._present: Dict[str, PresentLetter] = {}
        self._absent: Set[str] = set()

    @classmethod
    def from_result(cls, result: GuessResult) -> "WordRestrictions":
        """Restrictions implied by a single result."""
        restrictions = cls(len(result.guess))
        restrictions.update(result)
        return restrictions

    def copy(self) -> "WordRestrictions":
        other = WordRestrictions(self.word_length)
        other._present = {letter: p.copy() for letter, p in self._present.items()}
        other._absent = set(self._absent)
        return other

    @property
    def absent_letters(self) -> Set[str]:
        return set(self._absent)

    @property
    def present_letters(self) -> Set[str]:
        return set(self._present)

    def update(self, result: GuessResult) -> None:
        """
        Add the restrictions implied by `result`.

        Raises ConflictingRestrictionError if the result contradicts what is
        already known. On failure the restrictions may be partially updated
        and should not be used for further filtering.
        """
        if len(result.guess) != self.word_length:
            raise LengthMismatchError(
                f"The guess ({result.guess}) must have length {self.word_length}."
            )

        # Occurrences of each letter confirmed by this guess alone. A letter
        # that is also NotPresent somewhere in the same guess occurs exactly
        # that many times; otherwise it is only a lower bound.
        confirmed = Counter()
        capped: Set[str] = set()
        for letter, r in result:
            if r is LetterResult.NOT_PRESENT:
                capped.add(letter)
            elif r is not LetterResult.UNKNOWN:
                confirmed[letter] += 1

        for location, (letter, r) in enumerate(result):
            if r is LetterResult.CORRECT:
                self._set_letter_here(letter, location, confirmed[letter], letter in capped)
            elif r is LetterResult.PRESENT_NOT_HERE:
                self._set_letter_present_not_here(
                    letter, location, confirmed[letter], letter in capped)
            elif r is LetterResult.NOT_PRESENT:
                self._set_letter_not_present(letter, location, confirmed[letter])

    def merge(self, other: "WordRestrictions") -> None:
        """
        Add the restrictions held by `other` to this object.

        Raises ConflictingRestrictionError if the two are incompatible.
        """
        if self.word_length != other.word_length:
            raise LengthMismatchError(
                f"Can't merge restrictions with different word lengths "
                f"(has: {self.word_length}, received: {other.word_length})."
            )
        for letter in other._absent:
            if letter in self._present:
                raise ConflictingRestrictionError("Can't merge incompatible restrictions.")
            self._absent.add(letter)
        for letter, other_presence in other._present.items():
            if letter in self._absent:
                raise ConflictingRestrictionError("Can't merge incompatible restrictions.")
            presence = self._present.get(letter)
            if presence is None:
                self._present[letter] = other_presence.copy()
            else:
                presence.merge(other_presence)
        self._propagate_here_positions()

    def is_satisfied_by(self, word: str) -> bool:
        """True iff `word` could be the objective given everything known so far."""
        if len(word) != self.word_length:
            return False

        for letter, presence in self._present.items():
            count_found = 0
            states = presence.located_state
            for i, word_letter in enumerate(word):
                if word_letter == letter:
                    count_found += 1
                    if states[i] is _NOT_HERE:
                        return False
                elif states[i] is _HERE:
                    return False
            if presence.required_count is not None:
                if count_found != presence.required_count:
                    return False
            elif count_found < presence.min_count:
                return False

        absent = self._absent
        return not any(letter in absent for letter in word)

    def is_state_known(self, letter: str, location: int) -> bool:
        """True iff it is known whether `letter` is at `location`."""
        presence = self._present.get(letter)
        if presence is not None:
            return presence.state(location) is not _UNKNOWN
        return letter in self._absent

    def state(self, letter: str, location: int) -> LetterRestriction:
        presence = self._present.get(letter)
        if presence is not None:
            located = presence.state(location)
            if located is _HERE:
                return LetterRestriction.HERE
            if located is _NOT_HERE:
                return LetterRestriction.PRESENT_NOT_HERE
            return LetterRestriction.PRESENT_MAYBE_HERE
        if letter in self._absent:
            return LetterRestriction.NOT_PRESENT
        return LetterRestriction.UNKNOWN

    def letter_info(self, letter: str) -> Optional[PresentLetter]:
        """A copy of the tracked information for a present letter, if any."""
        presence = self._present.get(letter)
        return presence.copy() if presence is not None else None

    # ---- per-result updates ----

    def _presence_for(self, letter: str) -> PresentLetter:
        presence = self._present.get(letter)
        if presence is not None:
            return presence
        if letter in self._absent:
            raise ConflictingRestrictionError(
                f"Can't mark the letter {letter} as present since it's already "
                f"known not to be in the word."
            )
        presence = PresentLetter(self.word_length)
        # Positions already claimed by another letter can't hold this one.
        for other in self._present.values():
            for i, state in enumerate(other.located_state):
                if state is _HERE:
                    presence.mark_not_here(i)
        self._present[letter] = presence
        return presence

    def _apply_count(self, presence: PresentLetter, confirmed: int, capped: bool) -> None:
        if capped:
            presence.set_required_count(confirmed)
        else:
            presence.bump_min_count(confirmed)

    def _set_letter_here(self, letter: str, location: int, confirmed: int, capped: bool) -> None:
        presence = self._presence_for(letter)
        presence.mark_here(location)
        self._apply_count(presence, confirmed, capped)

        # A position holds exactly one letter.
        for other_letter, other_presence in self._present.items():
            if other_letter != letter:
                other_presence.mark_not_here(location)

    def _propagate_here_positions(self) -> None:
        """Mark every tracked letter NotHere wherever another letter is Here."""
        changed = True
        while changed:
            changed = False
            for letter, presence in self._present.items():
                for i, state in enumerate(presence.located_state):
                    if state is not _HERE:
                        continue
                    for other_letter, other_presence in self._present.items():
                        if other_letter == letter or other_presence.state(i) is _NOT_HERE:
                            continue
                        # Raises if both letters are Here at i.
                        other_presence.mark_not_here(i)
                        changed = True

    def _set_letter_present_not_here(
            self, letter: str, location: int, confirmed: int, capped: bool) -> None:
        presence = self._presence_for(letter)
        presence.mark_not_here(location)
        self._apply_count(presence, confirmed, capped)

    def _set_letter_not_present(self, letter: str, location: int, confirmed: int) -> None:
        presence = self._present.get(letter)
        if presence is None and confirmed == 0:
            self._absent.add(letter)
            return
        # The letter is in the word (known earlier, or elsewhere in this guess),
        # so NotPresent here means "no more than the confirmed occurrences".
        if presence is not None and presence.state(location) is _HERE:
            raise ConflictingRestrictionError(
                f"Can't mark the letter {letter} as not present at {location} "
                f"since it's already marked as present here."
            )
        presence = self._presence_for(letter)
        presence.mark_not_here(location)
        presence.set_required_count(confirmed)

    def __repr__(self) -> str:
        return (f"WordRestrictions(word_length={self.word_length}, "
                f"present={self._present!r}, absent={sorted(self._absent)!r})")
