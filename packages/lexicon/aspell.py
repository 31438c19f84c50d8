"""
System spell-checker backed by GNU Aspell.

Runs `aspell -a` (ispell-compatible pipe mode) once per lookup. Aspell
answers each input line with a banner line followed by one result line per
word:
  '*'  word is correct
  '+'  word is correct via a root form  (e.g. "+ WORK")
  '-'  word is a valid compound
  '&'  misspelled, with suggestions
  '#'  misspelled, no suggestions

Failures (binary missing, non-zero exit, unexpected output) raise
CheckerError; the validator treats that as "not a real word".
"""

from __future__ import annotations

import subprocess
from typing import List

from .base import DEFAULT_LANGUAGE, BaseChecker, CheckerError, register

_CORRECT = ("*", "+", "-")
_MISSPELLED = ("&", "#", "?")


@register
class AspellChecker(BaseChecker):
    id = "aspell"
    name = "GNU Aspell"

    def __init__(self, binary: str = "aspell", timeout: float = 5.0):
        self.binary = binary
        self.timeout = float(timeout)

    def _command(self, language: str) -> List[str]:
        return [self.binary, "-a", f"--lang={language}"]

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        word = word.strip()
        if not word or not word.isalpha():
            return False

        try:
            # '^' escapes the line so aspell never reads it as a command
            proc = subprocess.run(
                self._command(language),
                input=f"^{word}\n",
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise CheckerError(f"aspell lookup failed for {word!r}: {e}") from e

        return parse_pipe_output(proc.stdout)


def parse_pipe_output(output: str) -> bool:
    """
    Interpret aspell's pipe-mode output for a single word.

    The first line is the version banner ("@(#) International Ispell ...");
    the first non-empty line after it carries the verdict.
    """
    lines = output.splitlines()
    if not lines or not lines[0].startswith("@(#)"):
        raise CheckerError(f"unexpected aspell banner: {output[:60]!r}")

    for line in lines[1:]:
        if not line.strip():
            continue
        tag = line[0]
        if tag in _CORRECT:
            return True
        if tag in _MISSPELLED:
            return False
        raise CheckerError(f"unexpected aspell result line: {line!r}")

    raise CheckerError("aspell produced no result line")
