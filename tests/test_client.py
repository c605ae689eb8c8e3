import signal
from unittest import mock

import pytest

from sigtalk import client
from sigtalk.protocol import decode_bits, encode_char, signal_to_bit


def _sent_bits(kill_mock):
    return [signal_to_bit(call.args[1]) for call in kill_mock.call_args_list]


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_bit_zero_uses_sigusr1(kill, sleep):
    client.send_bit(123, 0, 0.5)
    assert kill.call_args_list == [mock.call(123, signal.SIGUSR1)]
    assert sleep.call_args_list == [mock.call(0.5)]
    assert _sent_bits(kill) == [0]


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_bit_one_uses_sigusr2(kill, sleep):
    client.send_bit(77, 1, 0)
    assert kill.call_args_list == [mock.call(77, signal.SIGUSR2)]
    assert signal_to_bit(kill.call_args.args[1]) == 1


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_bit_default_delay(kill, sleep):
    client.send_bit(5, 1)
    assert sleep.call_args_list == [mock.call(client.DEFAULT_DELAY)]
    assert kill.call_count == 1
    assert _sent_bits(kill) == [1]


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_char_sends_eight_bits_msb_first(kill, sleep):
    client.send_char(10, "A", 0)
    assert kill.call_count == 8
    assert tuple(_sent_bits(kill)) == encode_char("A")
    assert all(call.args[0] == 10 for call in kill.call_args_list)


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_message_round_trip(kill, sleep):
    client.send_message(42, "hi", 0)
    assert kill.call_count == 8 * 3
    assert decode_bits(_sent_bits(kill)) == b"hi\n"


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_message_utf8_round_trip(kill, sleep):
    text = "héllo"
    client.send_message(42, text, 0)
    assert decode_bits(_sent_bits(kill)) == text.encode("utf-8") + b"\n"


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_send_message_rejects_nul(kill, sleep):
    with pytest.raises(ValueError):
        client.send_message(42, "a\0b", 0)


@pytest.mark.parametrize("argv", [[], ["123"], ["123", "msg", "extra"]])
@mock.patch("os.kill")
def test_main_wrong_argument_count(kill, argv, capsys):
    assert client.main(argv) == 1
    assert capsys.readouterr().out == "Error\n"
    assert kill.call_count == 0


@pytest.mark.parametrize("pid_text", ["0", "-5", "abc", "--3"])
@mock.patch("os.kill")
def test_main_rejects_bad_pid(kill, pid_text, capsys):
    assert client.main([pid_text, "hello"]) == 1
    assert capsys.readouterr().out == "Error\n"
    assert kill.call_count == 0


@mock.patch("time.sleep")
@mock.patch("os.kill")
def test_main_sends_message(kill, sleep, capsys):
    assert client.main(["4242", "ok"]) == 0
    assert {call.args[0] for call in kill.call_args_list} == {4242}
    assert decode_bits(_sent_bits(kill)) == b"ok\n"
    assert capsys.readouterr().out == ""


@mock.patch("time.sleep")
@mock.patch("os.kill", side_effect=ProcessLookupError)
def test_main_reports_missing_process(kill, sleep, capsys):
    assert client.main(["4242", "ok"]) == 1
    assert capsys.readouterr().out == "Error\n"