import re
import socket
from logging.handlers import SysLogHandler

from asnzone.configuration import Option


class SyslogOption(Option):
    """
    Configuration option selecting syslog daemon that receives logs
    """
    network_re = r"(udp|tcp):(.+):([0-9]+)"
    socket_types = {"udp": socket.SOCK_DGRAM, "tcp": socket.SOCK_STREAM}

    def validate(self, value) -> bool:
        """ Validate that this value is a string specifying syslog destination
            or an empty string

        :param value: given value
        :return: True if value is valid otherwise False
        """
        if not isinstance(value, str):
            self.lgr.error("Syslog destination must be a string, but %s "
                           "was given", value)
            return False
        if not value or (value.startswith("unix:") and len(value) > 5):
            return True
        if re.fullmatch(self.network_re, value) is None:
            self.lgr.error("Bad syslog destination specification %s",
                           value)
            return False
        return True

    @staticmethod
    def parse_value(value: str) -> dict:
        """ Parse valid value of syslog_log option

        :param value: valid string value for this option
        :return: if unix domain is used then dict with "path" set,
                 otherwise dict with host, port and socket_type set
        """
        if value.startswith("unix:"):
            return {"path": value[5:]}
        protocol, host, port = re.fullmatch(SyslogOption.network_re,
                                            value).groups()
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        return {"socket_type": SyslogOption.socket_types[protocol],
                "host": host,
                "port": int(port)}

    def construct_handler(self, value: str) -> SysLogHandler | None:
        """ Construct SysLog handler connected to specified destination

        :param value: unix:<path> or <udp|tcp>:<host>:<port>, host may be
                      IPv6 address in square brackets
        :return: SysLogHandler if destination can be connected, otherwise
                 None
        """
        parsed = self.parse_value(value)
        try:
            if "path" in parsed:
                return SysLogHandler(address=parsed["path"])
            return SysLogHandler(address=(parsed["host"], parsed["port"]),
                                 socktype=parsed["socket_type"])
        except OSError as e:
            self.lgr.error("Error while trying to connect to syslog %s",
                           e)
            return None
