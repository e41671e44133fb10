"""
Subpackage for classes parsing configuration
"""

from .option import Option
from .string_option import StringOption
from .ip_option import IpOption
from .int_option import IntOption
from .bool_option import BoolOption
from .syslog_option import SyslogOption
from .asnzone_argument_parser import AsnzoneArgumentParser
