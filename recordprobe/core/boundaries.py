"""
Boundary value computation

Length probes test the two values either side of an inclusive limit; the
safe-name probe derives its corpora from the requested token length.
"""

from dataclasses import dataclass
from typing import List, Tuple

from recordprobe.shared.exceptions import ProbePreconditionError
from recordprobe.shared.schema import LengthOptions

PAYLOAD_CHAR = "a"


@dataclass(frozen=True)
class BoundaryPair:
    """The value at the limit (must pass) and one unit beyond it (must fail)"""

    valid: str
    invalid: str

    @classmethod
    def for_max(cls, limit: int, options: LengthOptions) -> "BoundaryPair":
        """
        Limit-length value and a value one character longer.

        Raises:
            ProbePreconditionError: if the framing alone exceeds the limit
        """
        payload = limit - options.framing_length
        if payload < 0:
            raise ProbePreconditionError(
                f"Framing of {options.framing_length} characters does not fit in "
                f"a maximum length of {limit}",
                context={"limit": limit, "framing": options.framing_length},
            )
        return cls(
            valid=_frame(payload, options),
            invalid=_frame(payload + 1, options),
        )

    @classmethod
    def for_min(cls, limit: int, options: LengthOptions) -> "BoundaryPair":
        """
        Limit-length value and a value one character shorter.

        Raises:
            ProbePreconditionError: if the payload cannot lose a character
        """
        payload = limit - options.framing_length
        if payload < 1:
            raise ProbePreconditionError(
                f"Minimum length of {limit} leaves no payload to shorten inside "
                f"{options.framing_length} characters of framing",
                context={"limit": limit, "framing": options.framing_length},
            )
        return cls(
            valid=_frame(payload, options),
            invalid=_frame(payload - 1, options),
        )


def _frame(payload_length: int, options: LengthOptions) -> str:
    return options.start_with + PAYLOAD_CHAR * payload_length + options.end_with


def safe_name_interior(width: int) -> str:
    """Alternating "_z" filler of the given width, ending in "_" when odd"""
    mid = ""
    while len(mid) < width:
        mid += "_z" if len(mid) + 1 < width else "_"
    return mid


def check_safe_name_length(length: int) -> None:
    if length <= 2:
        raise ProbePreconditionError(
            "Requires a field length greater than 2 to perform tests.",
            context={"length": length},
        )


def safe_name_valid_corpus(length: int) -> List[str]:
    """Tokens of the given length that every safe-name rule must accept"""
    check_safe_name_length(length)
    mid = safe_name_interior(length - 2)
    return [
        "a" * length,
        "a" + "1" * (length - 1),
        "a" + mid + "a",
        "a" + mid + "1",
    ]


def safe_name_invalid_corpus(length: int) -> List[Tuple[str, str]]:
    """
    (token, violation) pairs; violation is one of "start", "end", "chars"
    and selects the expected failure reason.
    """
    check_safe_name_length(length)
    body = "a" * (length - 2)
    return [
        ("_" + "a" * (length - 1), "start"),
        ("1" + "a" * (length - 1), "start"),
        ("a" * (length - 1) + "_", "end"),
        (body + "-" + "a", "chars"),
        (body + "#" + "a", "chars"),
        (body + " " + "a", "chars"),
    ]
