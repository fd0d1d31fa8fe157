"""Tests for urlpick.stdin_buffer"""
import threading

from urlpick.stdin_buffer import StdinBuffer, split_sequences


class TestSplitSequences:
    def test_plain_chars(self):
        assert split_sequences("ab") == (["a", "b"], "")

    def test_two_arrows(self):
        assert split_sequences("\x1b[A\x1b[B") == (["\x1b[A", "\x1b[B"], "")

    def test_incomplete_csi_kept(self):
        assert split_sequences("a\x1b[") == (["a"], "\x1b[")

    def test_lone_escape_kept(self):
        assert split_sequences("\x1b") == ([], "\x1b")

    def test_ss3(self):
        assert split_sequences("\x1bOA1") == (["\x1bOA", "1"], "")


class TestStdinBuffer:
    def test_basic_char_emitted(self):
        received = []
        buf = StdinBuffer(received.append)
        buf.process(b"a")
        assert received == ["a"]

    def test_complete_escape_sequence(self):
        received = []
        buf = StdinBuffer(received.append)
        buf.process(b"\x1b[A")
        assert received == ["\x1b[A"]

    def test_sequence_split_across_reads(self):
        received = []
        buf = StdinBuffer(received.append, timeout_ms=1000)
        buf.process(b"\x1b[")
        assert received == []
        buf.process(b"B")
        assert received == ["\x1b[B"]
        buf.destroy()

    def test_flush_returns_pending(self):
        received = []
        buf = StdinBuffer(received.append, timeout_ms=1000)
        buf.process(b"\x1b")
        assert buf.get_buffer() == "\x1b"
        assert buf.flush() == ["\x1b"]
        assert buf.get_buffer() == ""

    def test_lone_escape_delivered_after_timeout(self):
        got = threading.Event()
        received = []

        def on_data(seq):
            received.append(seq)
            got.set()

        buf = StdinBuffer(on_data, timeout_ms=10)
        buf.process(b"\x1b")
        assert got.wait(1)
        assert received == ["\x1b"]

    def test_utf8_decoded(self):
        received = []
        buf = StdinBuffer(received.append)
        buf.process("é".encode())
        assert received == ["é"]

    def test_high_bit_byte_is_meta(self):
        received = []
        buf = StdinBuffer(received.append)
        buf.process(b"\xe1")
        assert received == ["\x1ba"]
