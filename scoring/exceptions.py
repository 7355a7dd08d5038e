class ScoringError(Exception):
    """Base for all scoring engine errors."""
    code = "scoring_error"


class InvalidInput(ScoringError, ValueError):
    """Handicap index, slope, percentage or stroke count outside its domain."""
    code = "invalid_input"


class InvalidHoleSet(ScoringError):
    """Hole table is not 18 holes with stroke indexes forming a 1-18 permutation."""
    code = "invalid_hole_set"


class IncompleteHoleSequence(ScoringError):
    """Scores skip a hole that a later score depends on."""
    code = "incomplete_hole_sequence"


class UnsupportedFormatCombination(ScoringError):
    """No team combination is configured for the requested format."""
    code = "unsupported_format_combination"
