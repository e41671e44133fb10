from enum import Enum


class ExitCode(Enum):
    """ Exit codes used by asnzone """
    SUCCESS = 0
    INTEGRITY_FAILURE = 9
    INPUT_FAILURE = 10
    CONFIG_FAILURE = 11
    OUTPUT_FAILURE = 12
    BAD_ARGUMENTS = 13
