"""
Dictionary Service

Loads the word list once and answers membership and random-pick queries.
"""

import json
import random
from typing import Dict, FrozenSet, Iterable, Optional

from ..config.game_settings import DEFAULT_WORD_LIST_PATH, VOWELS, WORD_LENGTH
from ..errors import MalformedDictionary


class Dictionary:
    """
    Immutable set of legal words.

    Every entry is WORD_LENGTH uppercase letters, all distinct. The same set
    is the universe of opponent secrets, human guesses and the opponent's
    starting candidates.
    """

    def __init__(self, words: FrozenSet[str]):
        self._words = words
        # Sorted once so seeded random picks are reproducible
        self._ordered = sorted(words)

    @classmethod
    def from_words(cls, words: Iterable) -> 'Dictionary':
        """
        Build a dictionary from raw entries, validating each one.

        Raises:
            MalformedDictionary: If the list is empty or any entry is invalid
        """
        validated = set()
        for index, word in enumerate(words):
            if not isinstance(word, str):
                raise MalformedDictionary(f"Entry at index {index} is not a string: {word!r}")

            normalized = word.strip().upper()
            if len(normalized) != WORD_LENGTH:
                raise MalformedDictionary(
                    f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long"
                )
            if not normalized.isalpha():
                raise MalformedDictionary(
                    f"Word at index {index} '{word}' contains non-alphabetic characters"
                )
            if len(set(normalized)) != WORD_LENGTH:
                raise MalformedDictionary(
                    f"Word at index {index} '{word}' repeats a letter"
                )
            validated.add(normalized)

        if not validated:
            raise MalformedDictionary("Word list cannot be empty")

        return cls(frozenset(validated))

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'Dictionary':
        """
        Load the word list from a JSON array file.

        Args:
            path: File to read, defaults to the bundled words.json

        Raises:
            MalformedDictionary: If the file is missing, is not a JSON array
                of words, or holds an entry that breaks the word rules
        """
        json_file_path = path or DEFAULT_WORD_LIST_PATH

        try:
            with open(json_file_path, 'r', encoding='utf-8') as f:
                word_list = json.load(f)
        except FileNotFoundError:
            raise MalformedDictionary(f"Word list file not found: {json_file_path}")
        except json.JSONDecodeError as e:
            raise MalformedDictionary(f"Invalid JSON in {json_file_path}: {e}")

        if not isinstance(word_list, list):
            raise MalformedDictionary("JSON file must contain an array of words")

        return cls.from_words(word_list)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._ordered)

    def pick_random(self, rng: Optional[random.Random] = None) -> str:
        """Uniform choice over every entry."""
        return (rng or random).choice(self._ordered)

    def all(self) -> FrozenSet[str]:
        return self._words

    def statistics(self) -> Dict:
        """
        Analyzes the word list for game balancing.

        Returns:
            dict: Statistical analysis including:
                - total_words: Number of words in the dictionary
                - avg_vowel_count: Average vowels per word
                - letter_frequency: Number of words containing each letter
                - most_common_letters: Five most frequent letters
        """
        total_vowels = sum(len([char for char in word if char in VOWELS]) for word in self._ordered)

        letter_frequency = {}
        for word in self._ordered:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        return {
            "total_words": len(self._ordered),
            "avg_vowel_count": round(total_vowels / len(self._ordered), 2),
            "letter_frequency": letter_frequency,
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
        }
