"""
unittest integration

    class UserTest(RecordProbeMixin, unittest.TestCase):
        def test_name_rules(self):
            user = make_user()
            self.assert_required(user, "name")
            self.assert_max_length(user, "name", 10)

Failures are raised through the test case's own assertTrue/assertFalse.
"""

from typing import Any, Mapping, Optional, Union

from recordprobe.shared.enums import IpMaskPolicy
from recordprobe.shared.schema import LengthOptions, UniquenessOptions

from .formats import probe_email_format, probe_ip_format, probe_safe_name_format
from .length import probe_max_length, probe_min_length
from .presence import probe_required
from .record import PersistableRecord, ValidatableRecord
from .runner import PatternLike
from .uniqueness import probe_uniqueness


class RecordProbeMixin:
    """Probe assertions for unittest.TestCase subclasses"""

    def assert_required(
        self,
        record: ValidatableRecord,
        attribute: str,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_required(
            record,
            attribute,
            message,
            pattern,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )

    def assert_max_length(
        self,
        record: ValidatableRecord,
        attribute: str,
        max_length: int,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        options: Union[LengthOptions, Mapping[str, Any], None] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_max_length(
            record,
            attribute,
            max_length,
            message,
            pattern,
            options,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )

    def assert_min_length(
        self,
        record: ValidatableRecord,
        attribute: str,
        min_length: int,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        options: Union[LengthOptions, Mapping[str, Any], None] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_min_length(
            record,
            attribute,
            min_length,
            message,
            pattern,
            options,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )

    def assert_uniqueness(
        self,
        record: PersistableRecord,
        attribute: str,
        case_sensitive: bool = False,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        options: Union[UniquenessOptions, Mapping[str, Any], None] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_uniqueness(
            record,
            attribute,
            case_sensitive,
            message,
            pattern,
            options,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )

    def assert_email_validation(
        self,
        record: ValidatableRecord,
        attribute: str,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_email_format(
            record,
            attribute,
            message,
            pattern,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )

    def assert_ip_validation(
        self,
        record: ValidatableRecord,
        attribute: str,
        mask: Union[IpMaskPolicy, str] = IpMaskPolicy.ALLOW_MASK,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_ip_format(
            record,
            attribute,
            mask,
            message,
            pattern,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )

    def assert_safe_name_validation(
        self,
        record: ValidatableRecord,
        attribute: str,
        length: Optional[int] = None,
        message: Optional[str] = None,
        pattern: Optional[PatternLike] = None,
        *,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        probe_safe_name_format(
            record,
            attribute,
            length,
            message,
            pattern,
            asserter=self,  # type: ignore[arg-type]
            case_insensitive=case_insensitive,
        )
