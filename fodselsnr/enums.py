import enum


@enum.unique
class NINKind(enum.StrEnum):
    REGULAR = "regular"
    S_NUMBER = "s_number"
    D_NUMBER = "d_number"
    FS_NUMBER = "fs_number"


@enum.unique
class FailureReason(enum.StrEnum):
    INVALID_FORMAT = "invalid_format"
    IMPLAUSIBLE_DATE = "implausible_date"
    ILLEGAL_CONTROL_SUM = "illegal_control_sum"
    CHECKSUM_MISMATCH = "checksum_mismatch"


@enum.unique
class Sex(enum.StrEnum):
    """ISO/IEC 5218"""

    MALE = "1"
    FEMALE = "2"


class FodselsnrEnvironment(enum.StrEnum):
    PROD = "PROD"
    TEST = "TEST"
    DEV = "DEV"
