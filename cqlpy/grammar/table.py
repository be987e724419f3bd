"""Versioned CQL vocabulary and literal recognizers."""

from dataclasses import dataclass
import re
from typing import Final, Literal, TypeAlias

CqlVersion: TypeAlias = Literal["1.5.3"]

DEFAULT_VERSION: Final[CqlVersion] = "1.5.3"

# Shared by the scanner and by the formatter's literal protection.
STRING_PATTERN: Final[re.Pattern[str]] = re.compile(r'"(?:[^"\\\n]|\\.)*"|\'(?:[^\'\\\n]|\\.)*\'')
NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d+\.?\d*L?")
DATETIME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"@(?:"
    r"\d{4}(?:-\d{2}(?:-\d{2})?)?"
    r"(?:T(?:\d{2}(?::\d{2}(?::\d{2}(?:\.\d+)?)?)?)?(?:Z|[+-]\d{2}:\d{2})?)?"
    r"|T\d{2}(?::\d{2}(?::\d{2}(?:\.\d+)?)?)?"
    r")"
)
IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class GrammarTable:
    """Immutable vocabulary for one CQL language version."""

    version: CqlVersion
    keywords: frozenset[str]
    compound_keywords: tuple[tuple[str, str], ...]
    functions: frozenset[str]
    data_types: frozenset[str]
    operators: tuple[str, ...]
    text_operators: tuple[str, ...]
    string: re.Pattern[str] = STRING_PATTERN
    number: re.Pattern[str] = NUMBER_PATTERN
    datetime: re.Pattern[str] = DATETIME_PATTERN
    identifier: re.Pattern[str] = IDENTIFIER_PATTERN

    def is_keyword(self, word: str) -> bool:
        return word in self.keywords

    def is_function(self, word: str) -> bool:
        return word in self.functions

    def is_data_type(self, word: str) -> bool:
        return word in self.data_types

    def compound_keyword_tails(self, head: str) -> tuple[str, ...]:
        """Second words that can follow `head` to form a multi-word keyword."""
        return tuple(tail for first, tail in self.compound_keywords if first == head)


def _longest_first(symbols: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(sorted(symbols, key=len, reverse=True))


_KEYWORDS_1_5_3 = (
    "library", "using", "include", "define", "function", "parameter", "context",
    "public", "private", "valueset", "codesystem", "code", "concept", "where",
    "return", "if", "then", "else", "end", "and", "or", "not", "xor", "implies",
    "true", "false", "null", "exists", "in", "contains", "properly", "starts",
    "ends", "matches", "like", "from", "as", "let", "with", "such", "that",
    "all", "any", "some", "every", "distinct", "sort", "by", "asc", "desc",
    "union", "intersect", "except", "times", "divide", "mod", "div", "is",
    "cast", "convert", "to", "of", "between", "during", "meets", "overlaps",
    "includes", "included", "within", "same", "after", "before", "on", "more",
    "less", "equal", "greater", "than", "called", "version", "default", "display",
    "collapse", "expand", "flatten", "fluent", "per", "point", "predecessor",
    "successor", "singleton", "start", "starting", "timezoneoffset", "when",
    "width", "without", "year", "years", "month", "months", "week", "weeks",
    "day", "days", "hour", "hours", "minute", "minutes", "second", "seconds",
    "millisecond", "milliseconds", "maximum", "minimum", "difference", "duration",
    "occurs",
)  # fmt: skip

_FUNCTIONS_1_5_3 = (
    "Abs", "Add", "After", "AllTrue", "AnyTrue", "As", "Avg", "Before", "CanConvert",
    "Ceiling", "Coalesce", "Code", "CodeSystem", "Concept", "ConvertsToBoolean",
    "ConvertsToDate", "ConvertsToDateTime", "ConvertsToDecimal", "ConvertsToInteger",
    "ConvertsToLong", "ConvertsToQuantity", "ConvertsToString", "ConvertsToTime",
    "Count", "Date", "DateTime", "Day", "DaysBetween", "Distinct", "DurationBetween",
    "Ends", "Exists", "Exp", "Expand", "First", "Floor", "Flatten", "GeometricMean",
    "HighBoundary", "Hour", "HoursBetween", "Identifier", "If", "IndexOf", "Instance",
    "Interval", "Is", "IsNull", "IsTrue", "Last", "Length", "List", "Ln", "Log",
    "LowBoundary", "Lower", "Matches", "Max", "Maximum", "Mean", "Median", "Min",
    "Minimum", "Minute", "MinutesBetween", "Mode", "Modulo", "Month", "MonthsBetween",
    "Multiply", "Negate", "Not", "Now", "Null", "PointFrom", "PopulationStdDev",
    "PopulationVariance", "Power", "Predecessor", "Product", "Properly", "Quantity",
    "Round", "Second", "SecondsBetween", "Singletons", "Size", "Split", "Sqrt",
    "Starts", "StdDev", "String", "Substring", "Subtract", "Sum", "Time",
    "TimeOfDay", "Today", "ToBoolean", "ToConcept", "ToDate", "ToDateTime",
    "ToDecimal", "ToInteger", "ToLong", "ToQuantity", "ToString", "ToTime",
    "Truncate", "Union", "Upper", "Variance", "Width", "Year", "YearsBetween",
)  # fmt: skip

_DATA_TYPES_1_5_3 = (
    "Boolean", "Integer", "Long", "Decimal", "String", "DateTime", "Date", "Time",
    "Quantity", "Ratio", "Code", "Concept", "CodeableConcept", "Coding", "Identifier",
    "Reference", "Period", "Range", "Interval", "List", "Tuple", "Choice",
)  # fmt: skip

CQL_1_5_3: Final[GrammarTable] = GrammarTable(
    version="1.5.3",
    keywords=frozenset(_KEYWORDS_1_5_3),
    compound_keywords=(("or", "after"), ("or", "before"), ("or", "less"), ("or", "more")),
    functions=frozenset(_FUNCTIONS_1_5_3),
    data_types=frozenset(_DATA_TYPES_1_5_3),
    operators=_longest_first(("+", "-", "*", "/", "=", "<>", "!=", "<", ">", "<=", ">=")),
    text_operators=_longest_first(("and", "or", "not", "xor", "implies")),
)

_GRAMMARS: Final[dict[str, GrammarTable]] = {CQL_1_5_3.version: CQL_1_5_3}


def grammar_for(version: str = DEFAULT_VERSION) -> GrammarTable:
    """Return the grammar table for an explicit CQL version."""
    try:
        return _GRAMMARS[version]
    except KeyError:
        supported = ", ".join(sorted(_GRAMMARS))
        raise ValueError(f"Unsupported CQL version {version!r} (supported: {supported})") from None
