import os
import string
import subprocess
import sys

from shorty.utils.encoding import ALPHABET, generate_alias

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_alphabet_is_lowercase_letters_and_digits():
    assert set(ALPHABET) == set(string.ascii_lowercase + string.digits)
    assert len(ALPHABET) == 36


def test_generate_alias_length_and_charset():
    """Every generated alias has the requested length and only uses the alphabet."""
    for _ in range(2000):
        alias = generate_alias(5)
        assert len(alias) == 5
        assert set(alias) <= set(ALPHABET)


def test_generate_alias_zero_length():
    assert generate_alias(0) == ""


def test_generate_alias_various_lengths():
    for length in (1, 7, 64):
        assert len(generate_alias(length)) == length


def test_generate_alias_is_not_constant():
    aliases = {generate_alias(5) for _ in range(1000)}
    # 36**5 possibilities; a handful of duplicates at most
    assert len(aliases) > 990


def test_generate_alias_covers_alphabet():
    seen = set("".join(generate_alias(8) for _ in range(2000)))
    assert seen == set(ALPHABET)


def test_generate_alias_differs_across_processes():
    """No fixed seed: fresh interpreters produce different aliases."""
    code = "from shorty.utils.encoding import generate_alias; print(generate_alias(12))"
    outputs = {
        subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=PROJECT_ROOT).stdout.strip()
        for _ in range(3)
    }
    assert len(outputs) == 3
