"""Language Validator — declared languages and their agreement with the voice list."""

from typing import Any

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section


class LanguageValidator(BaseValidator):
    """Validates the top-level languages array.

    This is the only check that reads another section: the language of every
    entry in tts.supported_voices is compared against the languages array in
    both directions.
    """

    section = Section.LANGUAGES

    @property
    def name(self) -> str:
        return "LanguageValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        languages = self._get(config, "languages")

        if self._is_missing(languages):
            findings.append(self._error("languages array is missing", "languages"))
            return findings

        if not isinstance(languages, list):
            findings.append(self._error("languages must be an array", "languages"))
            return findings

        if len(languages) == 0:
            findings.append(self._error(
                "languages array is empty - agent cannot handle multilingual conversations",
                "languages",
            ))
            return findings

        findings.append(self._passed(f"languages: {', '.join(str(lang) for lang in languages)}", "languages"))

        voices = self._get(config, "tts", "supported_voices")
        if isinstance(voices, list):
            findings.extend(self._cross_check(languages, voices))

        return findings

    def _cross_check(self, languages: list, voices: list) -> list[Finding]:
        """Symmetric difference between declared languages and voice languages."""
        findings = []

        voice_languages = [
            lang for lang in (self._get(voice, "language") for voice in voices)
            if not self._is_missing(lang)
        ]

        missing_in_voices = self._difference(languages, voice_languages)
        missing_in_array = self._difference(voice_languages, languages)

        if missing_in_voices:
            findings.append(self._warning(
                f"Languages {', '.join(missing_in_voices)} in languages array but not in supported_voices",
                "languages",
            ))
        if missing_in_array:
            findings.append(self._warning(
                f"Languages {', '.join(missing_in_array)} in supported_voices but not in languages array",
                "tts.supported_voices",
            ))

        return findings

    @staticmethod
    def _difference(left: list[Any], right: list[Any]) -> list[str]:
        """Items of left not in right, first-seen order, no duplicates. Exact, case-sensitive match."""
        out: list[str] = []
        for item in left:
            if item not in right and str(item) not in out:
                out.append(str(item))
        return out
