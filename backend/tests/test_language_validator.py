"""Tests for the languages check and its cross-check against supported voices."""

import pytest

from conftest import by_severity
from voicecheck.validators.language_validator import LanguageValidator


def _config(languages, voice_languages) -> dict:
    return {
        "languages": languages,
        "tts": {"supported_voices": [{"voice_id": f"v-{lang}", "language": lang} for lang in voice_languages]},
    }


@pytest.fixture
def validator() -> LanguageValidator:
    return LanguageValidator()


def test_matching_languages_pass(validator) -> None:
    findings = validator.validate(_config(["en", "fr"], ["fr", "en"]))

    assert by_severity(findings, "pass") == ["languages: en, fr"]
    assert by_severity(findings, "warning") == []
    assert by_severity(findings, "error") == []


def test_language_missing_from_voices(validator) -> None:
    warnings = by_severity(validator.validate(_config(["en", "fr"], ["en"])), "warning")

    assert warnings == ["Languages fr in languages array but not in supported_voices"]


def test_voice_language_missing_from_array(validator) -> None:
    warnings = by_severity(validator.validate(_config(["en"], ["en", "fr"])), "warning")

    assert warnings == ["Languages fr in supported_voices but not in languages array"]


def test_both_directions_reported_independently(validator) -> None:
    warnings = by_severity(validator.validate(_config(["en", "de"], ["en", "fr"])), "warning")

    assert warnings == [
        "Languages de in languages array but not in supported_voices",
        "Languages fr in supported_voices but not in languages array",
    ]


def test_comparison_is_case_sensitive(validator) -> None:
    warnings = by_severity(validator.validate(_config(["EN"], ["en"])), "warning")

    assert len(warnings) == 2


def test_no_cross_check_without_supported_voices(validator) -> None:
    findings = validator.validate({"languages": ["en"]})

    assert by_severity(findings, "pass") == ["languages: en"]
    assert by_severity(findings, "warning") == []


def test_no_cross_check_when_voices_are_not_an_array(validator) -> None:
    findings = validator.validate({"languages": ["en"], "tts": {"supported_voices": "en"}})

    assert by_severity(findings, "warning") == []


@pytest.mark.parametrize(
    "languages, expected",
    [
        (None, "languages array is missing"),
        ("en", "languages must be an array"),
        ({"en": True}, "languages must be an array"),
        ([], "languages array is empty - agent cannot handle multilingual conversations"),
    ],
)
def test_languages_failure_modes(validator, languages, expected) -> None:
    findings = validator.validate(_config(languages, ["en"]))

    assert [f.message for f in findings] == [expected]
    assert findings[0].severity == "error"
