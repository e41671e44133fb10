import os
import logging
import sys
from argparse import ArgumentParser, BooleanOptionalAction, SUPPRESS

import yaml

from asnzone import CLICommands as Cmds
from asnzone import ExitCode
from asnzone.configuration import Option, StringOption, IntOption
from asnzone.configuration import IpOption, BoolOption, SyslogOption


class AsnzoneArgumentParser(ArgumentParser):
    log_format = "%(levelname)s: %(message)s"

    def __init__(self, *args, **kwargs) -> None:
        """ Asnzone argument parser

        :param args: arguments for the parent constructor
        :param kwargs: keyword arguments for the parent constructor
        """
        super().__init__(*args, **kwargs)
        self.lgr = logging.getLogger(self.__class__.__name__)
        self._parsed = None
        self._env = os.environ
        self._config_values = [
            StringOption("log_level",
                         "Log level of asnzone",
                         "WARNING",
                         validation=r"DEBUG|INFO|WARNING|ERROR|CRITICAL"),
            BoolOption("stderr_log",
                       "Log to stderr",
                       True),
            SyslogOption("syslog_log",
                         "Specify destination where syslog logs should "
                         "be sent",
                         ""),
            Option("file_log",
                   "Path to log file",
                   default=""),
            Option("config_file",
                   "Path where config file is located",
                   "/etc/asnzone.conf",
                   in_file=False,
                   in_args=True,
                   in_env=True),
            IntOption("ttl",
                      "TTL written into headers of both data files",
                      14400,
                      validation=(0, 2**31 - 1)),
            IntOption("max_rdata_length",
                      "Longest TXT data, trailing ASNs that do not fit "
                      "are left out",
                      250,
                      validation=(1, 255)),
            IpOption("answer_address",
                     "IPv4 address returned in A records of all entries",
                     "127.0.0.2",
                     validation=4),
            Option("ipv4_data",
                   "Path of IPv4 data file created by split",
                   "/var/lib/rbldns/zones/ipv4data.txt"),
            Option("ipv6_data",
                   "Path of IPv6 data file created by split",
                   "/var/lib/rbldns/zones/ipv6data.txt"),
        ]

    def add_arguments(self):
        """ Set up Asnzone arguments """
        for option in self._config_values:
            if not option.in_args:
                continue
            if isinstance(option, BoolOption):
                self.add_argument(option.arg_name,
                                  help=option.desc,
                                  default=None,
                                  action=BooleanOptionalAction)
            else:
                self.add_argument(option.arg_name,
                                  help=option.desc,
                                  default=None)

        self.set_defaults(func=lambda: Cmds.convert(vars(self._parsed)))

    def add_commands(self):
        """ Set up Asnzone commands """
        subparsers = self.add_subparsers(help="Subcommands")

        convert = subparsers.add_parser("convert",
                                        help="Convert announcement table "
                                             "on stdin into meta file on "
                                             "stdout, this is the default")
        convert.set_defaults(func=lambda: Cmds.convert(vars(self._parsed)))

        split = subparsers.add_parser("split",
                                      help="Split meta file into IPv4 and "
                                           "IPv6 data files")
        split.add_argument("meta_file",
                           help="Meta file created by convert")
        # unset unless given, so values placed before split survive
        for option in self._config_values:
            if option.name in ("ipv4_data", "ipv6_data"):
                split.add_argument(option.arg_name,
                                   help=option.desc,
                                   default=SUPPRESS)
        split.set_defaults(func=lambda: Cmds.split(vars(self._parsed)))

    def error(self, message):
        """ Report bad command line and exit

        :param message: description of the problem
        """
        self.print_usage(sys.stderr)
        self.exit(ExitCode.BAD_ARGUMENTS.value,
                  f"{self.prog}: error: {message}\n")

    def _config_log(self, config):
        handlers = []
        log_level = self._get_option_value(config, self._config_values[0])
        if self._get_option_value(config, self._config_values[1]):
            stderr_handler = logging.StreamHandler(sys.stderr)
            stderr_handler.setFormatter(logging.Formatter(self.log_format))
            handlers.append(stderr_handler)

        syslog_log = self._get_option_value(config, self._config_values[2])
        if syslog_log:
            syslog_handler = self._config_values[2].construct_handler(
                syslog_log)
            if syslog_handler:
                handlers.append(syslog_handler)

        file_log = self._get_option_value(config, self._config_values[3])
        if file_log:
            try:
                handlers.append(logging.FileHandler(file_log))
            except PermissionError as e:
                self.lgr.error("Was unable to open log file %s", e)
        if not handlers:
            handlers.append(logging.NullHandler())
        logging.basicConfig(level=log_level, handlers=handlers)

    def parse_args(self, *args, **kwargs):
        """ Parse arguments

        :param args: Arguments for the parent parse_args method
        :param kwargs: Keyword arguments for the parent parse_args method
        :raises ValueError: when an option has invalid value
        :return: namespace holding values of all options
        """

        self._parsed = super().parse_args(*args, **kwargs)

        # config will provide defaults
        if self._parsed.config_file is not None:
            config = self._read_config(self._parsed.config_file)
        else:
            config = self._read_config(self._env.get("CONFIG_FILE",
                                                     "/etc/asnzone.conf"))

        self._config_log(config)
        for option in self._config_values:
            setattr(self._parsed,
                    option.name,
                    self._get_option_value(config, option))

        return self._parsed

    def _get_option_value(self, config: dict, option: Option):
        final_val = option.default
        if (option.in_file
                and config.get(option.name, None) is not None):
            final_val = config[option.name]
            self.lgr.debug("Applying value %s"
                           " to %s from file", final_val, option.name)
        if (option.in_env
                and self._env.get(option.env_name, None) is not None):
            final_val = option.convert(self._env[option.env_name])
            self.lgr.debug("Applying value %s "
                           "to %s from env variable", final_val, option.name)
        if (option.in_args
                and getattr(self._parsed, option.name) is not None):
            final_val = option.convert(getattr(self._parsed, option.name))
            self.lgr.debug("Applying value %s "
                           "to %s from cmdline", final_val, option.name)
        if not option.validate(final_val):
            raise ValueError(f"Invalid value of {option.name}")

        return final_val

    @staticmethod
    def _open_config_file(path):
        # this method exists mainly for the sake of unit testing
        return open(path, "r", encoding="utf-8")

    def _read_config(self, path: str) -> dict:
        config = {}
        try:
            with self._open_config_file(path) as config_file:
                temp_config = yaml.safe_load(config_file)
            if temp_config is not None:
                config = temp_config
        except OSError as e:
            self.lgr.debug("Could not open configuration file "
                           "at %s, %s", path, e)
            return {}
        except yaml.YAMLError as e:
            self.lgr.warning("Could not parse configuration file "
                             "at %s, %s", path, e)
            return {}

        if not isinstance(config, dict):
            # yaml library returns string in some cases of invalid input
            self.lgr.warning("Configuration could not be parsed as YAML")
            return {}
        return config
