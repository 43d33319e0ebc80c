"""
Format corpora

Fixed, ordered sets of representative inputs. These literals are part of the
public contract: changing them changes what "passes the email probe" means.
"""

from typing import Tuple

EMAIL_VALID: Tuple[str, ...] = (
    "user@example.com",
    "USER@foo.COM",
    "A_US-ER@foo.bar.org",
    "first.last@foo.jp",
    "alice+bob@bax.cn",
)

EMAIL_INVALID: Tuple[str, ...] = (
    "user@example,com",
    "user_at_foo.org",
    "user@example.",
    "user@example.com.",
    "foo@bar_baz.com",
    "foo@bar+baz.com",
    "@example.com",
    "user@",
    "user",
    "user@..com",
    "user@example..com",
    "user@.example.com",
    "user@@example.com",
    "user@www@example.com",
)

IP_VALID: Tuple[str, ...] = (
    "0.0.0.0",
    "1.2.3.4",
    "10.20.30.40",
    "255.255.255.255",
    "10:20::30:40",
    "::1",
    "1:2:3:4:5:6:7:8",
    "A:B:C:D:E:F::",
)

IP_INVALID: Tuple[str, ...] = (
    "localhost",
    "100.200.300.400",
    "12345::abcde",
    "1.2.3.4.5",
    "1.2.3",
    "0",
    "1:2:3:4:5:6:7:8:9:0",
    "a:b:c:d:e:f:g:h",
)

MASKED_ADDRESS = "127.0.0.0/8"
UNMASKED_ADDRESS = "127.0.0.1"


def with_host_mask(address: str) -> str:
    """Append a single-host CIDR suffix: /128 for IPv6-looking text, else /32"""
    return address + ("/128" if ":" in address else "/32")
