"""Error kinds for the album client (machine-readable).

Every Failure returned by the client carries exactly one of these kinds.
They are ordered by where in the request pipeline the failure happened.

Kinds:
- INVALID_ARGUMENT: Local validation failed, no request was sent
- NETWORK: Transport failure (timeout, DNS, refused), no response received
- HTTP: Response received with a non-2xx status
- DECODE: 2xx response whose body does not match the expected shape
"""

from enum import Enum


class ErrorKind(Enum):
    """Classification of album client failures."""

    INVALID_ARGUMENT = "invalid_argument"
    NETWORK = "network"
    HTTP = "http"
    DECODE = "decode"
