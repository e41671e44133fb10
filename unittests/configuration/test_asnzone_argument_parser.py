from asnzone import ExitCode
from asnzone.configuration import AsnzoneArgumentParser

import pytest
from io import StringIO

DEFAULTS = {'log_level': 'WARNING',
            'stderr_log': True,
            'syslog_log': '',
            'file_log': '',
            'config_file': '/etc/asnzone.conf',
            'ttl': 14400,
            'max_rdata_length': 250,
            'answer_address': '127.0.0.2',
            'ipv4_data': '/var/lib/rbldns/zones/ipv4data.txt',
            'ipv6_data': '/var/lib/rbldns/zones/ipv6data.txt'}


def config_file_stream(path):
    return StringIO("")


def create_instance(config_stream, env):
    ins = AsnzoneArgumentParser()
    ins.lgr.disabled = True
    ins._config_log = lambda x: None
    ins._open_config_file = config_stream
    ins._env = env
    ins.add_arguments()
    ins.add_commands()
    return ins


@pytest.fixture
def empty_conf_instance():
    return create_instance(config_file_stream, {})


def filled_config_file_stream(path):
    return StringIO("ttl: 3600\nanswer_address: 127.0.0.3\n"
                    "max_rdata_length: 200\n")


@pytest.fixture
def filled_conf_instance():
    return create_instance(filled_config_file_stream,
                           {"ANSWER_ADDRESS": "127.0.0.4",
                            "STDERR_LOG": "no"})


@pytest.mark.parametrize("args, raised_exception, parsed", [
    (["--log-level", "DEBUG"], None, {**DEFAULTS, 'log_level': 'DEBUG'}),
    (["--ttl", "60"], None, {**DEFAULTS, 'ttl': 60}),
    (["--no-stderr-log"], None, {**DEFAULTS, 'stderr_log': False}),
    (["--log-level", "DEB"], ValueError, {}),
    (["--ttl", "minute"], ValueError, {}),
    (["--max-rdata-length", "300"], ValueError, {}),
    (["--answer-address", "::1"], ValueError, {}),
    (["--answer-address", "nonsense"], ValueError, {})
])
def test_parse(args, raised_exception, parsed, empty_conf_instance):
    if raised_exception is not None:
        with pytest.raises(raised_exception):
            empty_conf_instance.parse_args(args)
    else:
        output = vars(empty_conf_instance.parse_args(args))
        # we will not be checking func, it is a helper variable
        output.pop("func")
        assert output == parsed


@pytest.mark.parametrize("args, parsed", [
    (["--log-level", "ERROR"],
     {**DEFAULTS,
      'log_level': 'ERROR',
      'stderr_log': False,
      'ttl': 3600,
      'max_rdata_length': 200,
      'answer_address': '127.0.0.4'}),
    (["--answer-address", "127.0.0.5", "--stderr-log"],
     {**DEFAULTS,
      'stderr_log': True,
      'ttl': 3600,
      'max_rdata_length': 200,
      'answer_address': '127.0.0.5'}),
])
def test_override(args, parsed, filled_conf_instance):
    output = vars(filled_conf_instance.parse_args(args))
    output.pop("func")
    assert output == parsed


def test_split_command(empty_conf_instance):
    output = vars(empty_conf_instance.parse_args(
        ["--ipv4-data", "/tmp/v4.txt", "split", "meta.txt"]))
    assert output["meta_file"] == "meta.txt"
    assert output["ipv4_data"] == "/tmp/v4.txt"
    assert output["ipv6_data"] == DEFAULTS["ipv6_data"]


@pytest.mark.parametrize("content", [
    "ttl: [unclosed\n",
    "just a string\n",
])
def test_unusable_config_file(content):
    ins = create_instance(lambda path: StringIO(content), {})
    output = vars(ins.parse_args([]))
    output.pop("func")
    assert output == DEFAULTS


@pytest.mark.parametrize("args, ipv4_data, ipv6_data", [
    (["split", "meta.txt", "--ipv4-data", "/tmp/v4.txt",
      "--ipv6-data", "/tmp/v6.txt"], "/tmp/v4.txt", "/tmp/v6.txt"),
    (["split", "--ipv6-data", "/tmp/v6.txt", "meta.txt"],
     DEFAULTS["ipv4_data"], "/tmp/v6.txt"),
    (["--ipv4-data", "/tmp/a.txt", "split", "meta.txt",
      "--ipv4-data", "/tmp/b.txt"], "/tmp/b.txt", DEFAULTS["ipv6_data"]),
])
def test_split_options_after_command(args, ipv4_data, ipv6_data,
                                     empty_conf_instance):
    output = vars(empty_conf_instance.parse_args(args))
    assert output["meta_file"] == "meta.txt"
    assert output["ipv4_data"] == ipv4_data
    assert output["ipv6_data"] == ipv6_data


@pytest.mark.parametrize("args", [
    ["--no-such-option"],
    ["split"],
    ["convert", "--ipv4-data", "/tmp/v4.txt"],
])
def test_bad_arguments_exit_code(args, empty_conf_instance, capsys):
    with pytest.raises(SystemExit) as exc_info:
        empty_conf_instance.parse_args(args)
    assert exc_info.value.code == ExitCode.BAD_ARGUMENTS.value
    assert "error:" in capsys.readouterr().err


def test_non_string_syslog_in_file():
    ins = create_instance(lambda path: StringIO("syslog_log: 5\n"), {})
    ins._config_values[2].lgr.disabled = True
    with pytest.raises(ValueError):
        ins.parse_args([])
