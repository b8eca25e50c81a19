"""TTS Validator — voice and model selection plus the supported voice list."""

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section, Severity


class TTSValidator(BaseValidator):
    """Without a voice and model the agent cannot speak."""

    section = Section.TTS

    @property
    def name(self) -> str:
        return "TTSValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        tts = self._get(config, "tts")
        if self._is_missing(tts):
            findings.append(self._error("Missing tts configuration object", "tts"))
            return findings

        for key in ("voice_id", "model_id"):
            value = self._get(tts, key)
            if self._is_missing(value):
                findings.append(self._error(f"tts.{key} is missing or empty", f"tts.{key}"))
            else:
                findings.append(self._passed(f"tts.{key}: {value}", f"tts.{key}"))

        voices = self._check_array(
            findings,
            self._get(tts, "supported_voices"),
            "tts.supported_voices",
            empty_reason="agent cannot switch languages",
            missing_severity=Severity.ERROR,
            empty_severity=Severity.ERROR,
        )
        if voices is None:
            return findings

        findings.append(self._passed(
            f"tts.supported_voices: {len(voices)} voice(s) configured",
            "tts.supported_voices",
        ))

        # Every voice is checked; one bad entry doesn't hide the next
        for i, voice in enumerate(voices):
            prefix = f"tts.supported_voices[{i}]"
            if self._is_missing(self._get(voice, "voice_id")):
                findings.append(self._error(f"{prefix}.voice_id is missing", f"{prefix}.voice_id"))
            if self._is_missing(self._get(voice, "language")):
                findings.append(self._error(f"{prefix}.language is missing", f"{prefix}.language"))
            if self._is_missing(self._get(voice, "label")):
                findings.append(self._warning(f"{prefix}.label is missing", f"{prefix}.label"))

        return findings
