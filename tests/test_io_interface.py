from cardboard.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    TestIOInterface,
)


def test_test_io_interface_replays_input():
    io = TestIOInterface(["h"])
    io.add_input("s")
    assert io.input("? ") == "h"
    assert io.input("? ") == "s"
    assert io.input("? ") == "q"
    assert io.prompts == ["? "] * 3


def test_test_io_interface_collects_output():
    io = TestIOInterface()
    io.output("hello")
    assert io.sent_messages == ["hello"]


def test_dummy_io_interface_quits():
    io = DummyIOInterface()
    io.output("ignored")
    assert io.input("? ") == "q"


def test_console_output(capsys):
    ConsoleIOInterface().output("dealt")
    assert capsys.readouterr().out == "dealt\n"


def test_console_input_at_end_of_file(monkeypatch):
    def eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert ConsoleIOInterface().input("? ") == "q"
