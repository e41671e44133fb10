import logging
import sys
import typing

from asnzone import ExitCode
from asnzone.conversion import Converter, MetaSplitter
from asnzone.errors import ConversionError


class CLICommands:
    @staticmethod
    def convert(config: dict,
                input_stream: typing.TextIO = None,
                output_stream: typing.TextIO = None) -> typing.NoReturn:
        """ Convert announcement table into meta file

        Output is written only after the whole table was converted, any
        error means that nothing is written to output.

        :param config: dictionary containing configuration
        :param input_stream: table, defaults to stdin
        :param output_stream: meta file, defaults to stdout
        :return: No return
        """
        lgr = logging.getLogger("CLICommands")
        input_stream = input_stream if input_stream else sys.stdin
        output_stream = output_stream if output_stream else sys.stdout
        converter = Converter(config)
        try:
            lines = converter.convert(input_stream)
        except ConversionError as e:
            lgr.error("%s", e)
            sys.exit(e.exit_code.value)

        try:
            output_stream.writelines(f"{line}\n" for line in lines)
            output_stream.flush()
        except OSError as e:
            lgr.error("Writing meta file failed, %s", e)
            sys.exit(ExitCode.OUTPUT_FAILURE.value)

        warning = converter.warning()
        if warning:
            lgr.warning("%s", warning)
        sys.exit(ExitCode.SUCCESS.value)

    @staticmethod
    def split(config: dict) -> typing.NoReturn:
        """ Create IPv4 and IPv6 data files from meta file

        :param config: dictionary containing configuration and meta_file
        :return: No return
        """
        lgr = logging.getLogger("CLICommands")
        splitter = MetaSplitter(config["ipv4_data"], config["ipv6_data"])
        try:
            with open(config["meta_file"], "r", encoding="utf-8") as meta:
                success = splitter.split(meta)
        except OSError as e:
            lgr.error("Could not read meta file %s", e)
            sys.exit(ExitCode.OUTPUT_FAILURE.value)
        sys.exit(ExitCode.SUCCESS.value if success
                 else ExitCode.OUTPUT_FAILURE.value)
