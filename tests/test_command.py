import pytest

from termcraft.command import CSI, Command, execute, queue


class FakeWrite:
    def __init__(self):
        self.buffer = ""
        self.flushed = False

    def write(self, text):
        self.buffer += text
        self.flushed = False
        return len(text)

    def flush(self):
        self.flushed = True


class FailingWrite(FakeWrite):
    def write(self, text):
        raise OSError("write failed")


class FakeCommand(Command):
    def ansi(self):
        return "cmd"


class ValueCommand(Command):
    def __init__(self, value):
        self.value = value

    def ansi(self):
        return self.value


def test_queue_one():
    result = FakeWrite()
    queue(result, FakeCommand())
    assert result.buffer == "cmd"
    assert not result.flushed


def test_queue_many():
    result = FakeWrite()
    queue(result, FakeCommand(), FakeCommand())
    assert result.buffer == "cmdcmd"
    assert not result.flushed


def test_queue_from_list():
    result = FakeWrite()
    queue(result, *[FakeCommand(), FakeCommand()])
    assert result.buffer == "cmdcmd"
    assert not result.flushed


def test_execute_one():
    result = FakeWrite()
    execute(result, FakeCommand())
    assert result.buffer == "cmd"
    assert result.flushed


def test_execute_many():
    result = FakeWrite()
    execute(result, FakeCommand(), FakeCommand())
    assert result.buffer == "cmdcmd"
    assert result.flushed


def test_execute_without_commands_only_flushes():
    result = FakeWrite()
    execute(result)
    assert result.buffer == ""
    assert result.flushed


def test_many_queues_keep_order():
    result = FakeWrite()
    queue(result, ValueCommand("cmd1"))
    queue(result, ValueCommand("cmd2"))
    queue(result, ValueCommand("cmd3"))
    assert result.buffer == "cmd1cmd2cmd3"


def test_command_str_is_ansi():
    command = ValueCommand(CSI + "0m")
    assert Command.__str__(command) == "\x1b[0m"
    result = FakeWrite()
    queue(result, command)
    assert result.buffer == Command.__str__(command)


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_write_error_propagates_and_skips_flush():
    writer = FailingWrite()
    with pytest.raises(OSError):
        execute(writer, FakeCommand())
    assert not writer.flushed