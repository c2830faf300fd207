"""Arthur's hidden Easter egg."""

from __future__ import annotations

from dataclasses import dataclass

_MESSAGE = (
    "I confess. After graduating from university, I was blinded by the arrogance "
    "of starting a startup and recklessly blocked my friends' paths. I painfully "
    "learned that when I am the only one convinced by my idea, it leads to "
    "disastrous results. The past Arthur was a ghost of dogmatism and stubbornness."
)


def to_binary(ch) -> str:
    """Return the 8-bit binary form of a character or byte value."""
    value = ord(ch) if isinstance(ch, str) else ch
    return format(value & 0xFF, "08b")


@dataclass(frozen=True)
class EasterEgg:
    """A keyword hidden behind reversed binary clues, and its message."""

    keyword: str = "specter"
    message: str = _MESSAGE

    def reversed_binaries(self) -> list[str]:
        """Return the keyword's characters in reverse order, as binary strings."""
        return [to_binary(ch) for ch in reversed(self.keyword)]

    def is_right_chars(self, chars: str) -> bool:
        """Check that ``chars`` spell out the reversed binary clues in order."""
        wanted = self.reversed_binaries()
        return [to_binary(ch) for ch in chars[: len(wanted)]] == wanted

    def is_easter_egg(self, word: str) -> bool:
        """Check whether ``word`` is the hidden keyword."""
        return word == self.keyword


def shuffle_and_convert(keyword: str) -> list[str]:
    """Reverse the keyword, put odd positions before even ones, and binary-encode it."""
    reversed_word = keyword[::-1]
    shuffled = reversed_word[1::2] + reversed_word[0::2]
    return [to_binary(ch) for ch in shuffled]


def _read_token(prompt: str) -> str:
    try:
        tokens = input(prompt).split()
    except EOFError:
        return ""
    return tokens[0] if tokens else ""


def find_easter_egg(egg: EasterEgg) -> None:
    """Run the interactive Easter egg hunt."""
    print("<<Arthur's Easter Egg>>")
    print("Enter the characters for these reversed binary values:")
    for binary in egg.reversed_binaries():
        print(binary)
    limit = len(egg.keyword)
    chars = _read_token(f"Enter {limit} characters in order: ")[:limit]
    if not egg.is_right_chars(chars):
        print("Incorrect characters. Returning to menu.")
        return
    word = _read_token("Now combine and enter the full word: ")[:limit]
    if egg.is_easter_egg(word):
        print()
        print("##Easter Egg Discovered!$$")
        print(egg.message)
    else:
        print("Incorrect keyword. Returning to menu.")


def main(argv=None) -> int:
    """Greet the user, unlocking the Easter egg for Arthur."""
    name = _read_token("Enter your name (or Arthur to unlock Easter Egg): ")
    if name == "Arthur":
        find_easter_egg(EasterEgg())
    else:
        print(f"Welcome, {name}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())