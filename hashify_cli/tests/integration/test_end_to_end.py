# Path: hashify_cli/tests/integration/test_end_to_end.py
"""
Integration tests for the hashify command line.

Tests that verify:
1. Complete runs print one formatted line per algorithm
2. Profile queries and config documents change the configuration
3. Failures map to the documented exit codes

Each test runs main() in a clean working directory with fresh settings.
"""

import hashlib
import logging

import pytest

from hashify_cli.main import main


@pytest.fixture(autouse=True)
def fresh_settings(clean_env, reset_singletons, monkeypatch):
    """Run every test without a banner or console handler."""
    monkeypatch.setenv('HASHIFY_SHOW_BANNER', 'false')
    monkeypatch.setenv('HASHIFY_LOG_CONSOLE', 'false')
    yield


def script_lines(caplog):
    return [record.getMessage() for record in caplog.records if record.name == 'output.script']


class TestSuccessfulRuns:
    """Test runs that complete."""

    def test_crc32_with_defaults(self, caplog):
        assert main(['-i', "'abc'", '-a', 'CRC:CRC32']) == 0
        assert script_lines(caplog) == ['CRC: 53, 36, 65, 194']

    def test_hex_output_of_several_algorithms(self, caplog):
        code = main(['-i', "'abc'", '-a', 'MD5 SHA256', '-of', 'AsHexString()'])

        assert code == 0
        assert script_lines(caplog) == [
            f"MD5: {hashlib.md5(b'abc').hexdigest()}",
            f"SHA256: {hashlib.sha256(b'abc').hexdigest()}",
        ]

    def test_wildcard_runs_every_algorithm(self, caplog):
        assert main(['-i', "'abc'", '-a', '*', '-of', 'BitLength']) == 0
        assert len(script_lines(caplog)) == 12

    def test_custom_output_script(self, caplog):
        code = main([
            '-i', "'abc'", '-a', 'FNV1a', '-of', 'AsBigInteger()',
            '-o', 'Print("{0} -> {1}", Algorithm, hex(Result))',
        ])

        assert code == 0
        assert script_lines(caplog) == ['FNV1a -> 0x1a47e90b']

    def test_print_direct_writes_stdout(self, capsys):
        code = main(['-i', "'abc'", '-a', 'MD5', '-of', 'AsHexString()', '-o', 'PrintDirect(Result)'])

        assert code == 0
        assert capsys.readouterr().out == hashlib.md5(b'abc').hexdigest() + '\n'

    def test_settings_change_defaults(self, caplog, monkeypatch):
        monkeypatch.setenv('HASHIFY_TEXT_ENCODING', 'utf-16-le')
        monkeypatch.setenv('HASHIFY_OUTPUT_FINALIZER', 'AsHexString()')

        assert main(['-i', "'abc'", '-a', 'MD5']) == 0
        expected = hashlib.md5('abc'.encode('utf-16-le')).hexdigest()
        assert script_lines(caplog) == [f'MD5: {expected}']

    def test_input_from_file(self, caplog, tmp_path):
        (tmp_path / 'data.bin').write_bytes(b'\x00\x01\x02')

        code = main([
            '-i', "ReadAllBytes('data.bin')", '-if', 'Input',
            '-a', 'SHA1', '-of', 'AsHexString()',
        ])

        assert code == 0
        expected = hashlib.sha1(b'\x00\x01\x02').hexdigest()
        assert script_lines(caplog) == [f'SHA1: {expected}']


class TestConfiguration:
    """Test profile queries and config documents end to end."""

    def test_profile_query(self, caplog):
        code = main(['-i', "'abc'", '-a', 'CRC:A CRC:B', '-cp', 'CRC:A=CRC8 CRC=CRC64', '-of', 'BitLength'])

        assert code == 0
        assert script_lines(caplog) == ['CRC: 8', 'CRC: 64']

    def test_config_file_profile_and_override(self, caplog, write_json):
        path = write_json({
            'CRC:Small': {'profile': 'CRC16'},
            'Blake2b': {'config': {'HashSizeInBits': 128}},
        })

        code = main(['-i', "'abc'", '-a', 'CRC:Small Blake2b', '-cf', str(path), '-of', 'BitLength'])

        assert code == 0
        assert script_lines(caplog) == ['CRC: 16', 'Blake2b: 128']

    def test_unknown_algorithm_in_config_file_is_skipped(self, caplog, write_json):
        path = write_json({'Nope': {'profile': 'X'}, 'CRC': {'profile': 'CRC8'}})

        with caplog.at_level(logging.WARNING):
            code = main(['-i', "'abc'", '-a', 'CRC', '-cf', str(path), '-of', 'BitLength'])

        assert code == 0
        assert any(record.levelno == logging.WARNING for record in caplog.records)
        assert script_lines(caplog) == ['CRC: 8']

    def test_both_profile_sources_warn(self, caplog, write_json):
        path = write_json({'CRC': {'profile': 'CRC8'}})

        code = main([
            '-i', "'abc'", '-a', 'CRC', '-cp', 'CRC=CRC16', '-cf', str(path), '-of', 'BitLength',
        ])

        assert code == 0
        assert 'Both --config-profiles and --config-file' in caplog.text
        assert script_lines(caplog) == ['CRC: 16']

    def test_command_line_file(self, caplog, tmp_path):
        (tmp_path / 'job.args').write_text('-i "\'abc\'"\n-a MD5\n', encoding='utf-8')

        code = main(['-cl', 'job.args', '-a', 'CRC:CRC32'])

        assert code == 0
        assert script_lines(caplog) == ['CRC: 53, 36, 65, 194']


class TestListings:
    """Test help and listing commands."""

    def test_no_arguments_prints_usage(self, caplog):
        assert main([]) == 0
        assert 'Usage: hashify' in caplog.text

    def test_help(self, caplog):
        assert main(['-h']) == 0
        assert '--config-profiles' in caplog.text
        assert '[for each algorithm: -input >> --input-finalizer >> Compute' in caplog.text

    def test_list_algorithms(self, caplog):
        assert main(['-l']) == 0
        assert '  - Argon2id (Cryptographic)' in caplog.text
        assert '  - Adler32 (Non-Cryptographic)' in caplog.text

    def test_list_profiles(self, caplog):
        assert main(['-lp', 'crc']) == 0
        assert "Available Config Profiles of 'CRC':" in caplog.text
        assert '  - CRC32C' in caplog.text

    def test_list_profiles_of_unknown_algorithm(self, caplog):
        assert main(['-lp', 'Nope']) == 1
        assert "No algorithm found with 'Nope'" in caplog.text


class TestFailures:
    """Test exit codes of failing runs."""

    def test_script_failure_exits_with_two(self, caplog):
        code = main(['-i', "'abc'", '-a', 'MD5', '-o', "Fail('Digest {0} rejected', Algorithm)"])

        assert code == 2
        assert 'Digest MD5 rejected' in caplog.text

    def test_script_error_exits_with_one(self, caplog):
        assert main(['-i', 'undefined_name', '-a', 'MD5']) == 1
        assert 'input script failed: NameError' in caplog.text

    def test_unresolvable_query(self, caplog):
        assert main(['-i', "'abc'", '-a', 'Nope']) == 1
        assert "Invalid or unsupported algorithm query 'Nope'" in caplog.text
        assert 'Available Hash Algorithms:' in caplog.text

    def test_malformed_profile_query(self, caplog):
        assert main(['-i', "'abc'", '-a', 'CRC', '-cp', 'CRC']) == 1
        assert 'Usage: hashify' in caplog.text

    def test_missing_input_script(self, caplog):
        assert main(['-a', 'MD5']) == 1
        assert '--input requires a non-empty script' in caplog.text

    def test_unknown_option(self):
        assert main(['-i', "'abc'", '-a', 'MD5', '--bogus']) == 1

    def test_missing_config_file(self, tmp_path):
        assert main(['-i', "'abc'", '-a', 'MD5', '-cf', str(tmp_path / 'missing.json')]) == 1

    @pytest.mark.parametrize('script', ['exit(0)', 'quit()', 'raise SystemExit(5)'])
    def test_script_exit_is_a_runtime_error(self, caplog, script):
        """Leaving the interpreter from a script still reports exit code 1."""
        assert main(['-i', script, '-a', 'MD5 SHA1']) == 1
        assert 'input script failed: SystemExit' in caplog.text
        assert script_lines(caplog) == []

    def test_config_file_with_invalid_utf8(self, caplog, tmp_path):
        path = tmp_path / 'configs.json'
        path.write_bytes(b'{"CRC": {"profile": "\xff"}}')

        assert main(['-i', "'abc'", '-a', 'CRC', '-cf', str(path)]) == 1
        assert 'Could not read config file' in caplog.text

    def test_repeated_config_key_keeps_first(self, caplog, tmp_path):
        path = tmp_path / 'configs.json'
        path.write_text(
            '{"CRC": {"profile": "CRC8"}, "CRC": {"profile": "CRC64"}}', encoding='utf-8'
        )

        code = main(['-i', "'abc'", '-a', 'CRC', '-cf', str(path), '-of', 'BitLength'])

        assert code == 0
        assert script_lines(caplog) == ['CRC: 8']

    def test_failure_stops_remaining_algorithms(self, caplog):
        code = main(['-i', "'abc'", '-a', 'MD5 SHA1', '-o', "Fail('stop') if Algorithm == 'MD5' else Print(Algorithm)"])

        assert code == 2
        assert script_lines(caplog) == []
