"""Regression corpus of name pairs the engine is tuned against."""

from __future__ import annotations

from dataclasses import dataclass

from app.verification.engine import VerificationEngine, VerificationOutcome


@dataclass(frozen=True, slots=True)
class CorpusCase:
    target: str
    candidate: str
    expected_match: bool
    description: str


@dataclass(slots=True)
class CorpusCaseResult:
    case: CorpusCase
    outcome: VerificationOutcome

    @property
    def passed(self) -> bool:
        return self.outcome.match == self.case.expected_match


REGRESSION_CASES: tuple[CorpusCase, ...] = (
    # Expected matches
    CorpusCase("Tyler Bliha", "Tlyer Bilha", True, "Minor transposition and misspelling"),
    CorpusCase("Al-Hilal", "alhilal", True, "Hyphen and casing differences only"),
    CorpusCase("Dargulov", "Darguloff", True, "Common phonetic suffix variation (v vs ff)"),
    CorpusCase("Bob Ellensworth", "Robert Ellensworth", True, "Common nickname vs formal name"),
    CorpusCase("Mohammed Al Fayed", "Muhammad Alfayed", True, "Spacing and transliteration variance"),
    CorpusCase("Sarah O'Connor", "Sara Oconnor", True, "Apostrophe removal and vowel simplification"),
    CorpusCase("Jonathon Smith", "Jonathan Smith", True, "Common spelling variant of first name"),
    CorpusCase("Abdul Rahman ibn Saleh", "Abdulrahman ibn Saleh", True, "Spacing variation within compound name"),
    CorpusCase("Al Hassan Al Saud", "Al-Hasan Al Saud", True, "Minor consonant simplification and hyphenation"),
    CorpusCase("Katherine McDonald", "Catherine Macdonald", True, "Phonetic first name and common Mc/Mac variation"),
    CorpusCase("Yusuf Al Qasim", "Youssef Alkasim", True, "Transliteration differences in Arabic-derived names"),
    CorpusCase("Steven Johnson", "Stephen Jonson", True, "Phonetic spelling differences in both names"),
    CorpusCase("Alexander Petrov", "Aleksandr Petrof", True, "Slavic transliteration and phonetic variation"),
    CorpusCase("Jean-Luc Picard", "Jean Luc Picard", True, "Hyphen removal"),
    CorpusCase("Mikhail Gorbachov", "Mikhail Gorbachev", True, "Alternate transliteration endings"),
    CorpusCase("Elizabeth Turner", "Liz Turner", True, "Common nickname shortening"),
    CorpusCase("Omar ibn Al Khattab", "Omar Ibn Alkhattab", True, "Case, spacing, and compound-name variance"),
    CorpusCase("Sean O'Brien", "Shawn Obrien", True, "Phonetic first name and punctuation removal"),
    # Expected non-matches
    CorpusCase("Emanuel Oscar", "Belinda Oscar", False, "Same last name but entirely different first name"),
    CorpusCase("Michael Thompson", "Michelle Thompson", False, "Similar-looking but distinct first names"),
    CorpusCase("Ali Hassan", "Hassan Ali", False, "Token order swap changes identity"),
    CorpusCase("John Smith", "James Smith", False, "Different common first names"),
    CorpusCase("Abdullah ibn Omar", "Omar ibn Abdullah", False, "Reversal of patronymic meaning"),
    CorpusCase("Maria Gonzalez", "Mario Gonzalez", False, "Gendered name difference"),
    CorpusCase("Christopher Nolan", "Christian Nolan", False, "Similar prefix but distinct names"),
    CorpusCase("Ahmed Al Rashid", "Ahmed Al Rashidi", False, "Different surname root"),
    CorpusCase("Samantha Lee", "Samuel Lee", False, "Different first name despite shared root"),
    CorpusCase("Ivan Petrov", "Ilya Petrov", False, "Distinct given names in same cultural group"),
    CorpusCase("Fatima Zahra", "Zahra Fatima", False, "Name order inversion changes identity"),
    CorpusCase("William Carter", "Liam Carter", False, "Nickname not universally equivalent without explicit mapping"),
)


def run_corpus(
    engine: VerificationEngine,
    cases: tuple[CorpusCase, ...] = REGRESSION_CASES,
) -> list[CorpusCaseResult]:
    """Verify every corpus case with the given engine."""

    return [CorpusCaseResult(case=case, outcome=engine.verify(case.target, case.candidate)) for case in cases]
